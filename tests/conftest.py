"""
Shared test fixtures and configuration.
"""

import pytest
import os
import sys
from unittest.mock import MagicMock

# Add the parent directory to the path so we can import the provisioner package
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from provisioner.config import Configuration, ENV_VARS

PUBLIC_KEY = b"ssh-ed25519 AAAAC3NzaC1lZDI1NTE5AAAAIEXAMPLEKEYMATERIAL user@host\n"


def make_ec2_client(
    vpc_ids=("vpc-1",),
    public_ip="3.3.3.3",
    subnet_ids=("subnet-a", "subnet-b"),
    instance_ids=("i-123",),
):
    """Build a MagicMock EC2 client with scripted responses for the five calls."""
    client = MagicMock()
    client.describe_vpcs.return_value = {
        "Vpcs": [{"VpcId": vpc_id, "IsDefault": True} for vpc_id in vpc_ids]
    }
    client.allocate_address.return_value = {
        "PublicIp": public_ip,
        "AllocationId": "eipalloc-12345",
        "Domain": "vpc",
    }
    client.import_key_pair.return_value = {"KeyName": "test-key", "KeyPairId": "key-12345"}
    client.describe_subnets.return_value = {
        "Subnets": [{"SubnetId": subnet_id} for subnet_id in subnet_ids]
    }
    client.run_instances.return_value = {
        "Instances": [{"InstanceId": instance_id} for instance_id in instance_ids]
    }
    return client


@pytest.fixture
def ec2_client():
    """Fixture for an EC2 client double with successful responses."""
    return make_ec2_client()


@pytest.fixture
def public_key_file(tmp_path):
    """Write a public key to a temporary file and return its path."""
    path = tmp_path / "id_ed25519.pub"
    path.write_bytes(PUBLIC_KEY)
    return str(path)


@pytest.fixture
def config(public_key_file):
    """A fully populated configuration."""
    return Configuration(
        region="us-east-1",
        access_key_id="AKIAEXAMPLE",
        secret_access_key="secret",
        key_name="test-key",
        public_key_path=public_key_file,
        ami_id="ami-0c55b159cbfafe1f0",
        instance_type="t2.micro",
    )


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every provisioner variable from os.environ, restoring them afterwards."""
    for var in ENV_VARS.values():
        # setenv first so monkeypatch remembers the original state
        monkeypatch.setenv(var, "placeholder")
        monkeypatch.delenv(var)
    return monkeypatch


@pytest.fixture
def full_env(clean_env, public_key_file):
    """Set every required variable in os.environ."""
    clean_env.setenv("AWS_REGION", "us-east-1")
    clean_env.setenv("AWS_ACCESS_KEY_ID", "AKIAEXAMPLE")
    clean_env.setenv("AWS_SECRET_ACCESS_KEY", "secret")
    clean_env.setenv("KEY_NAME", "test-key")
    clean_env.setenv("PUBLIC_KEY_PATH", public_key_file)
    clean_env.setenv("AMI_ID", "ami-0c55b159cbfafe1f0")
    clean_env.setenv("INSTANCE_TYPE", "t2.micro")
    return clean_env
