"""
EC2 provisioning steps.
"""

from .addresses import allocate_elastic_ip
from .keypairs import expand_path, import_key_pair
from .instances import launch_instance

__all__ = [
    'allocate_elastic_ip',
    'expand_path',
    'import_key_pair',
    'launch_instance',
]
