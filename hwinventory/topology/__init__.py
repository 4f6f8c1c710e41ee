# hwinventory/topology/__init__.py
"""
CPU topology: NUMA nodes and the memory caches shared by their processors.
"""

from .memory_cache import MemoryCache, MemoryCacheType, caches_for_node
from .node import Architecture, Node, TopologyInfo, node_ids, topology_info

__all__ = [
    'MemoryCache',
    'MemoryCacheType',
    'caches_for_node',
    'Architecture',
    'Node',
    'TopologyInfo',
    'node_ids',
    'topology_info'
]
