import logging

logger = logging.getLogger(__name__)


def allocate_elastic_ip(client) -> str:
    """
    Allocate a new Elastic IP address in the VPC domain.

    Every call allocates a fresh address; nothing releases it afterwards.

    Args:
        client: EC2 client

    Returns:
        str: The allocated public IP
    """
    logger.debug("Calling AllocateAddress with Domain=vpc")
    response = client.allocate_address(Domain="vpc")
    return response["PublicIp"]
