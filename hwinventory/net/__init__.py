# hwinventory/net/__init__.py
"""
Network interface descriptors.
"""

from .nic import NIC, NICCapability, UNKNOWN_SPEED
from .ethtool import parse_nic_attr_ethtool, parse_ethtool_features

__all__ = [
    'NIC',
    'NICCapability',
    'UNKNOWN_SPEED',
    'parse_nic_attr_ethtool',
    'parse_ethtool_features'
]
