"""
Networking lookups.
"""

from .vpc import get_default_vpc, list_subnet_ids, select_subnet

__all__ = [
    'get_default_vpc',
    'list_subnet_ids',
    'select_subnet',
]
