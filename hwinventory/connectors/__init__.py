# hwinventory/connectors/__init__.py
"""
Connectors that give collectors access to a system's files and commands.
"""

from .base_connector import Connector, CommandResult
from .local_connector import LocalConnector
from .ssh_connector import SSHConnector

__all__ = [
    'Connector',
    'CommandResult',
    'LocalConnector',
    'SSHConnector'
]
