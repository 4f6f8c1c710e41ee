# hwinventory/collectors/sub_collectors/topology_sub_collector.py
"""
Topology Sub-Collector
Collects NUMA nodes, their logical processors and shared memory caches.
"""

from typing import Dict, Any
from .base_sub_collector import SubCollector
from ...topology import topology_info


class TopologySubCollector(SubCollector):
    """
    Collects CPU topology from /sys/devices/system/node.

    Returns data in 'topology' section.
    """

    def get_section_name(self) -> str:
        return "topology"

    def collect(self) -> Dict[str, Any]:
        self.log_start()

        info = topology_info(self.paths, self.connector, self.warn)
        for node in info.nodes:
            for cache in node.caches:
                self.logger.debug(f"node{node.id}: {cache}")

        self.log_end(len(info.nodes))
        return info.to_dict()
