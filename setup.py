from setuptools import setup, find_packages

setup(
    name="ec2-provisioner",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "boto3>=1.26.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "provision-ec2=provisioner.cli:main",
        ],
    },
    python_requires=">=3.8",
    author="Stefano Marzani",
    author_email="stefano@piezo.cc",
    description="Provision an Elastic IP, key pair and EC2 instance in the default VPC with boto3",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
