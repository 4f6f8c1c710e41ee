# hwinventory/topology/memory_cache.py
"""
Memory cache topology discovery.

Each /sys/devices/system/node/nodeX directory holds a 'cpuX' entry for every
logical processor assigned to the node. Each of those has a 'cache'
directory with one 'indexN' subdirectory per cache the processor can see,
containing 'type', 'level', 'size' and 'shared_cpu_map' files.

A cache shared by several processors is reported once under every one of
them, so the walk folds identical (level, type, shared_cpu_map) reports into
a single MemoryCache carrying the set of processors that share it.
"""

import logging
import posixpath
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from ..connectors import Connector, LocalConnector
from ..utils.linuxpath import Paths
from ..utils.logging_config import WarnFunc

logger = logging.getLogger('topology.memory_cache')

KB = 1024

_CPU_ENTRY = re.compile(r'^cpu(\d+)$')
_INDEX_ENTRY = re.compile(r'^index(\d+)$')

# Node-wide summaries that share the 'cpu' prefix
_NODE_CPU_SUMMARIES = ('cpumap', 'cpulist')


class MemoryCacheType(Enum):
    UNIFIED = 'unified'
    INSTRUCTION = 'instruction'
    DATA = 'data'

    @classmethod
    def from_sysfs(cls, value: str) -> 'MemoryCacheType':
        """Classify the payload of a cache 'type' file"""
        if value == 'Data':
            return cls.DATA
        if value == 'Instruction':
            return cls.INSTRUCTION
        return cls.UNIFIED


@dataclass
class MemoryCache:
    """
    A distinct processor cache on one node.

    level and size_bytes are None when the platform value could not be read.
    """
    level: Optional[int]
    type: MemoryCacheType
    size_bytes: Optional[int]
    logical_processors: List[int] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            'level': self.level,
            'type': self.type.value,
            'size_bytes': self.size_bytes,
            'logical_processors': list(self.logical_processors)
        }

    def __str__(self) -> str:
        type_suffix = {MemoryCacheType.DATA: 'd', MemoryCacheType.INSTRUCTION: 'i'}.get(self.type, '')
        level = self.level if self.level is not None else '?'
        size = f"{self.size_bytes // KB} KB" if self.size_bytes is not None else "unknown size"
        shared = ''
        if self.logical_processors:
            shared = " shared with logical processors: " + ','.join(str(lp) for lp in self.logical_processors)
        return f"L{level}{type_suffix} cache ({size}){shared}"


def _strip_newline(contents: bytes) -> str:
    text = contents.decode('utf-8', errors='replace')
    if text.endswith('\n'):
        text = text[:-1]
    return text


def _warn_or_log(warn: Optional[WarnFunc]) -> WarnFunc:
    return warn if warn is not None else logger.warning


def memory_cache_type(connector: Connector, index_path: str) -> MemoryCacheType:
    """Read and classify the cache type. Raises OSError if unreadable."""
    contents = connector.read_file(posixpath.join(index_path, 'type'))
    return MemoryCacheType.from_sysfs(_strip_newline(contents))


def memory_cache_level(connector: Connector, index_path: str, warn: Optional[WarnFunc] = None) -> Optional[int]:
    """Read the cache depth, None if it cannot be read or parsed"""
    warn = _warn_or_log(warn)
    level_path = posixpath.join(index_path, 'level')
    try:
        contents = connector.read_file(level_path)
    except OSError as e:
        warn(f"Unable to read {level_path}: {e}")
        return None
    try:
        return int(_strip_newline(contents))
    except ValueError:
        warn(f"Unable to parse int from {contents!r}")
        return None


def memory_cache_size(connector: Connector, index_path: str, warn: Optional[WarnFunc] = None) -> Optional[int]:
    """Read the cache size in bytes, None if it cannot be read or parsed"""
    warn = _warn_or_log(warn)
    size_path = posixpath.join(index_path, 'size')
    try:
        contents = connector.read_file(size_path)
    except OSError as e:
        warn(f"Unable to read {size_path}: {e}")
        return None
    # size comes as e.g. "32K\n"
    text = _strip_newline(contents)
    if text.endswith('K'):
        text = text[:-1]
    try:
        return int(text) * KB
    except ValueError:
        warn(f"Unable to parse int from {contents!r}")
        return None


def memory_cache_shared_cpu_map(connector: Connector, index_path: str) -> str:
    """Read the raw sharing bitmap. Raises OSError if unreadable."""
    return _strip_newline(connector.read_file(posixpath.join(index_path, 'shared_cpu_map')))


def logical_processor_ids(entries: List[str]) -> List[int]:
    """Pick the logical processor ids out of a node directory listing"""
    lp_ids = []
    for name in entries:
        if name in _NODE_CPU_SUMMARIES:
            continue
        if _CPU_ENTRY.match(name):
            lp_ids.append(int(name[3:]))
    return lp_ids


def caches_for_node(node_id: int, paths: Optional[Paths] = None, connector: Optional[Connector] = None,
                    warn: Optional[WarnFunc] = None) -> List[MemoryCache]:
    """
    Discover the distinct memory caches of a node's logical processors.

    Args:
        node_id: NUMA node identifier, assumed to exist
        paths: sysfs locations (defaults to the live system or HWINVENTORY_CHROOT)
        connector: file access (defaults to the local filesystem)
        warn: receives diagnostics for attribute files that could not be read

    Returns:
        List of MemoryCache, one per distinct (level, type, sharing map).
        Order is unspecified.

    Raises:
        OSError: if the node directory or a processor's cache directory
            cannot be listed
    """
    paths = paths or Paths.from_env()
    connector = connector or LocalConnector()
    warn = _warn_or_log(warn)

    caches: Dict[Tuple[Optional[int], MemoryCacheType, str], MemoryCache] = {}

    for lp_id in logical_processor_ids(connector.list_dir(paths.node(node_id))):
        cache_path = paths.node_cpu_cache(node_id, lp_id)
        for entry in connector.list_dir(cache_path):
            if not _INDEX_ENTRY.match(entry):
                continue
            index_path = posixpath.join(cache_path, entry)

            try:
                cache_type = memory_cache_type(connector, index_path)
            except OSError:
                continue
            level = memory_cache_level(connector, index_path, warn)
            size = memory_cache_size(connector, index_path, warn)
            try:
                shared_cpu_map = memory_cache_shared_cpu_map(connector, index_path)
            except OSError:
                continue

            key = (level, cache_type, shared_cpu_map)
            cache = caches.get(key)
            if cache is None:
                cache = MemoryCache(level=level, type=cache_type, size_bytes=size)
                caches[key] = cache
            cache.logical_processors.append(lp_id)

    for cache in caches.values():
        cache.logical_processors = sorted(set(cache.logical_processors))

    return list(caches.values())
