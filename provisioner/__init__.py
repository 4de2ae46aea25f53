"""
Provision a minimal EC2 setup: look up the default VPC, allocate an
Elastic IP, import an SSH key pair and launch one instance.
"""

from .config import Configuration, load_env_file
from .client import create_ec2_client
from .workflow import provision, ProvisioningResult

__all__ = [
    'Configuration',
    'load_env_file',
    'create_ec2_client',
    'provision',
    'ProvisioningResult',
]
