"""
Command-line entry point.

Loads the configuration, builds the EC2 client and runs the workflow.
Any failure is logged and ends the process with exit status 1.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .client import create_ec2_client
from .config import DEFAULT_ENV_FILE, Configuration, load_env_file
from .errors import ProvisionerError
from .workflow import provision

logger = logging.getLogger("provisioner")


def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Provision an Elastic IP, a key pair and an EC2 instance in the default VPC"
    )
    parser.add_argument(
        "-env", "--env",
        dest="env_file",
        default=DEFAULT_ENV_FILE,
        help=f"Path to .env file (default: {DEFAULT_ENV_FILE})",
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    """Main function."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )
    # botocore logs credential lookups at INFO
    logging.getLogger("botocore").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    load_env_file(args.env_file)

    try:
        config = Configuration.from_environ()
        client = create_ec2_client(config.region)
        provision(config, client)
    except ProvisionerError as e:
        logger.error("%s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
