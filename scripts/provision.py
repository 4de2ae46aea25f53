#!/usr/bin/env python3
"""
Provision Script

Looks up the default VPC, allocates an Elastic IP, imports an SSH key pair
from PUBLIC_KEY_PATH and launches one EC2 instance. Settings are read from
the environment, optionally pre-populated from a .env file:

    python scripts/provision.py -env path/to/.env
"""

import os
import sys

# Add the parent directory to the path so we can import the provisioner package
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from provisioner.cli import main

if __name__ == "__main__":
    main()
