import logging
from typing import List

from ..errors import ResourceNotFoundError

logger = logging.getLogger(__name__)


def get_default_vpc(client) -> str:
    """
    Look up the account's default VPC in the client's region.

    Args:
        client: EC2 client

    Returns:
        str: The default VPC ID

    Raises:
        ResourceNotFoundError: If the region has no default VPC
    """
    logger.debug("Calling DescribeVpcs with is-default=true")
    response = client.describe_vpcs(
        Filters=[
            {
                "Name": "is-default",
                "Values": ["true"],
            },
        ]
    )
    vpcs = response.get("Vpcs", [])
    if not vpcs:
        raise ResourceNotFoundError("no default VPC found")
    return vpcs[0]["VpcId"]


def list_subnet_ids(client) -> List[str]:
    """
    List the IDs of all subnets visible to the client, in response order.

    No filter is applied, so subnets of every VPC in the region are returned.
    """
    logger.debug("Calling DescribeSubnets")
    response = client.describe_subnets()
    return [subnet["SubnetId"] for subnet in response.get("Subnets", [])]


def select_subnet(subnet_ids: List[str]) -> str:
    """
    Pick the subnet to launch into.

    Args:
        subnet_ids: Candidate subnet IDs, in listing order

    Returns:
        str: The first subnet

    Raises:
        ResourceNotFoundError: If there are no candidates
    """
    if not subnet_ids:
        raise ResourceNotFoundError("no subnets found in the current VPC")

    return subnet_ids[0]
