# tests/conftest.py
"""
Shared fixtures: a fake sysfs tree built under tmp_path, and a connector
that serves canned command output.
"""

import sys
from pathlib import Path
from typing import Dict, Iterable

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from hwinventory.connectors import CommandResult, LocalConnector
from hwinventory.utils.linuxpath import Paths


class SysfsTree:
    """Builds the parts of /sys the inventory reads"""

    def __init__(self, root: Path):
        self.root = root
        self.paths = Paths(str(root))

    def _write(self, path: Path, contents: str):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(contents)

    @property
    def node_root(self) -> Path:
        return self.root / 'sys' / 'devices' / 'system' / 'node'

    def add_node(self, node_id: int, distances: Iterable[int] = None) -> Path:
        node_dir = self.node_root / f'node{node_id}'
        node_dir.mkdir(parents=True, exist_ok=True)
        if distances is not None:
            self._write(node_dir / 'distance', ' '.join(str(d) for d in distances) + '\n')
        return node_dir

    def add_cache(self, node_id: int, cpu: int, index: int, cache_type: str = 'Data',
                  level: str = '1', size: str = '32K', shared_cpu_map: str = '00000001',
                  omit: Iterable[str] = ()):
        """Add cpuN/cache/indexM with its attribute files; omit names files to leave out"""
        index_dir = self.add_node(node_id) / f'cpu{cpu}' / 'cache' / f'index{index}'
        index_dir.mkdir(parents=True, exist_ok=True)
        attrs = {
            'type': f'{cache_type}\n',
            'level': f'{level}\n',
            'size': f'{size}\n',
            'shared_cpu_map': f'{shared_cpu_map}\n',
        }
        for name, contents in attrs.items():
            if name not in omit:
                self._write(index_dir / name, contents)
        return index_dir

    def add_cpu(self, node_id: int, cpu: int) -> Path:
        cache_dir = self.add_node(node_id) / f'cpu{cpu}' / 'cache'
        cache_dir.mkdir(parents=True, exist_ok=True)
        return cache_dir

    def add_node_file(self, node_id: int, name: str, contents: str = '\n'):
        self._write(self.add_node(node_id) / name, contents)

    def add_dmi(self, fields: Dict[str, str]):
        for name, value in fields.items():
            self._write(self.root / 'sys' / 'class' / 'dmi' / 'id' / name, f'{value}\n')

    def add_nic(self, name: str, address: str, speed: str = None, duplex: str = None,
                physical: bool = True):
        iface_dir = self.root / 'sys' / 'class' / 'net' / name
        iface_dir.mkdir(parents=True, exist_ok=True)
        self._write(iface_dir / 'address', f'{address}\n')
        if speed is not None:
            self._write(iface_dir / 'speed', f'{speed}\n')
        if duplex is not None:
            self._write(iface_dir / 'duplex', f'{duplex}\n')
        if physical:
            (iface_dir / 'device').mkdir()
        return iface_dir


class CannedConnector(LocalConnector):
    """Local file access with scripted command results"""

    def __init__(self, commands: Dict[str, CommandResult] = None):
        super().__init__()
        self.platform = 'linux'
        self.commands = commands or {}
        self.executed = []

    def execute_command(self, command: str, timeout: int = None, log_command: bool = True) -> CommandResult:
        self.executed.append(command)
        for prefix, result in self.commands.items():
            if command.startswith(prefix):
                return result
        return CommandResult(False, error=f"{command}: not found", exit_code=127, command=command)


@pytest.fixture
def sysfs(tmp_path):
    """Empty fake sysfs tree rooted at tmp_path"""
    return SysfsTree(tmp_path)


@pytest.fixture
def warnings_log():
    """Collects diagnostics passed to a warn callback"""
    messages = []
    return messages


@pytest.fixture
def canned_connector():
    return CannedConnector
