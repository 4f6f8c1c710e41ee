# hwinventory/__init__.py
"""
Hardware inventory: memory cache topology, DMI identifiers and network
interfaces read from sysfs, SSH-reachable hosts or WMI.
"""

from .topology import MemoryCache, MemoryCacheType, caches_for_node, topology_info
from .dmi import DMIReader
from .collectors import InventoryCollector, CollectionResult

__version__ = '0.1.0'

__all__ = [
    'MemoryCache',
    'MemoryCacheType',
    'caches_for_node',
    'topology_info',
    'DMIReader',
    'InventoryCollector',
    'CollectionResult'
]
