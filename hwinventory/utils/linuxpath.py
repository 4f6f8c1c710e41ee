# hwinventory/utils/linuxpath.py
"""
Path resolution for Linux hardware metadata.
All sysfs locations are derived from a single root so a snapshot of /sys
unpacked anywhere can be inventoried.
"""

import os
import posixpath
from dataclasses import dataclass

CHROOT_ENV = 'HWINVENTORY_CHROOT'


@dataclass(frozen=True)
class Paths:
    """Resolved sysfs locations under a root directory"""
    root: str = '/'

    @classmethod
    def from_env(cls, default: str = '/') -> 'Paths':
        """Build paths using HWINVENTORY_CHROOT when it is set"""
        return cls(os.getenv(CHROOT_ENV) or default)

    def join(self, *parts) -> str:
        return posixpath.join(self.root, *parts)

    @property
    def sys_devices_system_node(self) -> str:
        return self.join('sys', 'devices', 'system', 'node')

    @property
    def sys_class_dmi(self) -> str:
        return self.join('sys', 'class', 'dmi')

    @property
    def sys_class_net(self) -> str:
        return self.join('sys', 'class', 'net')

    def node(self, node_id: int) -> str:
        return posixpath.join(self.sys_devices_system_node, f"node{node_id}")

    def node_cpu(self, node_id: int, lp_id: int) -> str:
        return posixpath.join(self.node(node_id), f"cpu{lp_id}")

    def node_cpu_cache(self, node_id: int, lp_id: int) -> str:
        return posixpath.join(self.node_cpu(node_id, lp_id), 'cache')
