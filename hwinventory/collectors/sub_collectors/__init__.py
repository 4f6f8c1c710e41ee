# hwinventory/collectors/sub_collectors/__init__.py
"""
Sub-collectors for the inventory collector.
Each sub-collector is responsible for one inventory section.
"""

from .base_sub_collector import SubCollector
from .topology_sub_collector import TopologySubCollector
from .dmi_sub_collector import DMISubCollector
from .network_sub_collector import NetworkSubCollector

__all__ = [
    'SubCollector',
    'TopologySubCollector',
    'DMISubCollector',
    'NetworkSubCollector'
]
