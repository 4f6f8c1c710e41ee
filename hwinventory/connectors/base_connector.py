# hwinventory/connectors/base_connector.py
"""
Common interface for connectors that expose a system's hardware metadata.
Collectors never touch the filesystem directly; they read files, list
directories and run commands through a connector.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List


@dataclass
class CommandResult:
    """Result of command execution"""
    success: bool
    output: str = ""
    error: str = ""
    exit_code: int = 0
    execution_time: float = 0.0
    command: str = ""


class Connector(ABC):
    """
    Abstract base class for connectors.

    File operations raise OSError (FileNotFoundError, PermissionError, ...)
    when the path is absent or unreadable. Command execution never raises;
    failures are reported through CommandResult.
    """

    platform = 'linux'

    @abstractmethod
    def read_file(self, path: str) -> bytes:
        """Read the whole file at path"""
        pass

    @abstractmethod
    def list_dir(self, path: str) -> List[str]:
        """List entry names of the directory at path"""
        pass

    @abstractmethod
    def path_exists(self, path: str) -> bool:
        pass

    @abstractmethod
    def execute_command(self, command: str, timeout: int = None, log_command: bool = True) -> CommandResult:
        pass

    def connect(self) -> bool:
        return True

    def disconnect(self):
        pass

    def check_command_availability(self, command: str) -> bool:
        """Check if a command is available on the system"""
        result = self.execute_command(f"which {command} >/dev/null 2>&1", log_command=False)
        return result.success

    def __enter__(self):
        if self.connect():
            return self
        raise ConnectionError(f"Failed to connect using {self.__class__.__name__}")

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.disconnect()
