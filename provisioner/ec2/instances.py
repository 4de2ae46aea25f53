import logging
from typing import NamedTuple

from ..config import Configuration
from ..errors import InstanceLaunchError
from ..networking.vpc import list_subnet_ids, select_subnet

logger = logging.getLogger(__name__)


class LaunchedInstance(NamedTuple):
    instance_id: str
    subnet_id: str


def launch_instance(client, config: Configuration) -> LaunchedInstance:
    """
    Launch a single EC2 instance in the first available subnet.

    Args:
        client: EC2 client
        config: Configuration providing AMI_ID, INSTANCE_TYPE and KEY_NAME

    Returns:
        LaunchedInstance: The new instance ID and the subnet it was placed in

    Raises:
        ConfigurationError: If AMI_ID, INSTANCE_TYPE or KEY_NAME is unset
        ResourceNotFoundError: If no subnets are visible
        InstanceLaunchError: If EC2 reports success but returns no instance
    """
    ami_id = config.require("ami_id")
    instance_type = config.require("instance_type")
    key_name = config.require("key_name")

    subnet_id = select_subnet(list_subnet_ids(client))
    print(f"Using subnet ID: {subnet_id}")

    logger.debug("Calling RunInstances with %s (%s) in %s", ami_id, instance_type, subnet_id)
    response = client.run_instances(
        ImageId=ami_id,
        InstanceType=instance_type,
        MinCount=1,
        MaxCount=1,
        SubnetId=subnet_id,
        KeyName=key_name,
    )

    instances = response.get("Instances", [])
    if not instances:
        raise InstanceLaunchError("no instances were created")

    return LaunchedInstance(instances[0]["InstanceId"], subnet_id)
