# hwinventory/topology/node.py
"""
NUMA node discovery. Builds one Node per /sys/devices/system/node/nodeX
directory and attaches the node's caches.
"""

import logging
import posixpath
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from ..connectors import Connector, LocalConnector
from ..utils.linuxpath import Paths
from ..utils.logging_config import WarnFunc
from .memory_cache import MemoryCache, caches_for_node, logical_processor_ids

logger = logging.getLogger('topology.node')

_NODE_ENTRY = re.compile(r'^node(\d+)$')


class Architecture(Enum):
    SMP = 'smp'
    NUMA = 'numa'


@dataclass
class Node:
    id: int
    logical_processors: List[int] = field(default_factory=list)
    caches: List[MemoryCache] = field(default_factory=list)
    distances: List[int] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            'id': self.id,
            'logical_processors': list(self.logical_processors),
            'caches': [cache.to_dict() for cache in self.caches],
            'distances': list(self.distances)
        }


@dataclass
class TopologyInfo:
    architecture: Architecture
    nodes: List[Node] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            'architecture': self.architecture.value,
            'nodes': [node.to_dict() for node in self.nodes]
        }


def node_ids(paths: Paths, connector: Connector) -> List[int]:
    """List the NUMA node ids present on the system, ascending"""
    ids = []
    for entry in connector.list_dir(paths.sys_devices_system_node):
        match = _NODE_ENTRY.match(entry)
        if match:
            ids.append(int(match.group(1)))
    return sorted(ids)


def node_distances(node_id: int, paths: Paths, connector: Connector,
                   warn: WarnFunc) -> List[int]:
    """Read the node's distance vector, empty if unavailable"""
    distance_path = posixpath.join(paths.node(node_id), 'distance')
    try:
        contents = connector.read_file(distance_path).decode('utf-8', errors='replace')
    except OSError as e:
        warn(f"Unable to read {distance_path}: {e}")
        return []
    try:
        return [int(value) for value in contents.split()]
    except ValueError:
        warn(f"Unable to parse distances from {contents!r}")
        return []


def topology_info(paths: Optional[Paths] = None, connector: Optional[Connector] = None,
                  warn: Optional[WarnFunc] = None) -> TopologyInfo:
    """
    Discover every NUMA node with its processors, caches and distances.

    Raises:
        OSError: if the node root or any node's cache hierarchy cannot be listed
    """
    paths = paths or Paths.from_env()
    connector = connector or LocalConnector()
    warn = warn if warn is not None else logger.warning

    nodes = []
    for node_id in node_ids(paths, connector):
        logger.debug(f"Inspecting node{node_id}")
        nodes.append(Node(
            id=node_id,
            logical_processors=sorted(logical_processor_ids(connector.list_dir(paths.node(node_id)))),
            caches=caches_for_node(node_id, paths, connector, warn),
            distances=node_distances(node_id, paths, connector, warn)
        ))

    architecture = Architecture.SMP if len(nodes) == 1 else Architecture.NUMA
    return TopologyInfo(architecture=architecture, nodes=nodes)
