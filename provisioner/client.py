"""
EC2 client construction.
"""

import logging

import boto3
from botocore.exceptions import BotoCoreError

from .errors import ClientCreationError

logger = logging.getLogger(__name__)


def create_ec2_client(region: str):
    """
    Create an EC2 client bound to a region.

    Credentials are resolved by boto3's default chain, which picks up
    AWS_ACCESS_KEY_ID and AWS_SECRET_ACCESS_KEY from the environment.

    Args:
        region: AWS region name (e.g., us-east-1)

    Returns:
        An EC2 client

    Raises:
        ClientCreationError: If the session or client cannot be built
    """
    try:
        session = boto3.session.Session(region_name=region)
        client = session.client("ec2")
    except (BotoCoreError, ValueError) as e:
        raise ClientCreationError(f"Unable to load AWS SDK config: {e}") from e

    logger.debug("Created EC2 client for region %s", region)
    return client
