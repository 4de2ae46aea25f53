"""
The provisioning workflow.

Steps run strictly in order and the first failure stops the run. Nothing
that was already created is rolled back.
"""

import logging
from typing import Any, Callable, NamedTuple

from botocore.exceptions import BotoCoreError, ClientError

from .config import Configuration
from .ec2.addresses import allocate_elastic_ip
from .ec2.instances import launch_instance
from .ec2.keypairs import import_key_pair
from .errors import ProvisionerError, StepFailedError
from .networking.vpc import get_default_vpc

logger = logging.getLogger(__name__)


class ProvisioningResult(NamedTuple):
    vpc_id: str
    public_ip: str
    key_name: str
    subnet_id: str
    instance_id: str


def _run_step(description: str, func: Callable[..., Any], *args) -> Any:
    logger.debug("Starting step: %s", description)
    try:
        return func(*args)
    except (ProvisionerError, ClientError, BotoCoreError) as e:
        raise StepFailedError(description, e) from e


def provision(config: Configuration, client) -> ProvisioningResult:
    """
    Run the full provisioning sequence against an EC2 client.

    The default VPC ID and Elastic IP are reported but not passed to the
    later steps; the instance is launched into the first listed subnet
    and the address is left unassociated.

    Args:
        config: Resolved configuration
        client: EC2 client (or any object exposing the same five calls)

    Returns:
        ProvisioningResult: Identifiers of everything that was provisioned

    Raises:
        StepFailedError: If any step fails
    """
    vpc_id = _run_step("get default VPC", get_default_vpc, client)
    print(f"Using Default VPC ID: {vpc_id}")

    public_ip = _run_step("allocate Elastic IP", allocate_elastic_ip, client)
    print(f"Elastic IP: {public_ip}")

    key_name = _run_step("create key pair from public key", import_key_pair, client, config)
    print("Key pair created successfully.")

    launched = _run_step("create EC2 instance", launch_instance, client, config)
    print(f"EC2 Instance ID: {launched.instance_id}")

    return ProvisioningResult(
        vpc_id=vpc_id,
        public_ip=public_ip,
        key_name=key_name,
        subnet_id=launched.subnet_id,
        instance_id=launched.instance_id,
    )
