# hwinventory/connectors/local_connector.py
"""
Local connector: reads the local filesystem and runs local commands.
"""

import logging
import os
import subprocess
import sys
import time
from typing import List

from .base_connector import Connector, CommandResult


class LocalConnector(Connector):
    """Connector for the machine the inventory runs on"""

    def __init__(self, timeout: int = 30):
        self.timeout = timeout
        self.platform = 'windows' if sys.platform.startswith('win') else 'linux'
        self.logger = logging.getLogger('connector.local')

    def read_file(self, path: str) -> bytes:
        with open(path, 'rb') as f:
            return f.read()

    def list_dir(self, path: str) -> List[str]:
        return os.listdir(path)

    def path_exists(self, path: str) -> bool:
        return os.path.lexists(path)

    def execute_command(self, command: str, timeout: int = None, log_command: bool = True) -> CommandResult:
        if timeout is None:
            timeout = self.timeout

        if log_command:
            self.logger.debug(f"Executing: {command}")

        start_time = time.time()
        try:
            proc = subprocess.run(
                command,
                shell=True,
                capture_output=True,
                text=True,
                errors='replace',
                timeout=timeout
            )
        except subprocess.TimeoutExpired:
            execution_time = time.time() - start_time
            error_msg = f"Command '{command}' timed out after {execution_time:.2f}s (timeout: {timeout}s)"
            self.logger.error(error_msg)
            return CommandResult(False, error=error_msg, execution_time=execution_time, command=command)
        except OSError as e:
            execution_time = time.time() - start_time
            error_msg = f"Command '{command}' execution failed: {e}"
            self.logger.error(error_msg)
            return CommandResult(False, error=error_msg, execution_time=execution_time, command=command)

        execution_time = time.time() - start_time
        success = proc.returncode == 0
        if not success:
            self.logger.debug(f"Command '{command}' failed with exit code {proc.returncode}")

        return CommandResult(
            success=success,
            output=proc.stdout,
            error=proc.stderr,
            exit_code=proc.returncode,
            execution_time=execution_time,
            command=command
        )
