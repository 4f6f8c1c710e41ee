# hwinventory/connectors/ssh_connector.py
"""
SSH connector for inventorying remote hosts.
Commands run over an SSH channel; sysfs files are read over SFTP so that
missing files surface as the same OSError family the local connector raises.
"""

import paramiko
import socket
import time
from typing import List
from pathlib import Path
import logging

from .base_connector import Connector, CommandResult


class SSHConnector(Connector):
    """
    SSH connector for reading hardware metadata from remote systems.
    Supports key-based and password authentication.
    """

    def __init__(self, host: str, port: int = 22, username: str = 'root',
                 password: str = None, ssh_key_path: str = None, timeout: int = 30):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.ssh_key_path = ssh_key_path
        self.timeout = timeout

        self.client = None
        self._sftp = None
        self.logger = logging.getLogger(f'ssh_connector.{host}')

    def connect(self) -> bool:
        """
        Establish SSH connection to the remote host.

        Returns:
            bool: True if connection successful, False otherwise
        """
        try:
            self.client = paramiko.SSHClient()
            self.client.set_missing_host_key_policy(paramiko.AutoAddPolicy())

            connect_params = {
                'hostname': self.host,
                'port': self.port,
                'username': self.username,
                'timeout': self.timeout
            }

            if self.ssh_key_path:
                key_path = Path(self.ssh_key_path).expanduser()
                if key_path.exists():
                    connect_params['key_filename'] = str(key_path)
                    self.logger.debug(f"Using SSH key: {key_path}")
                else:
                    self.logger.warning(f"SSH key not found: {key_path}")
                    if not self.password:
                        return False

            if self.password and not self.ssh_key_path:
                connect_params['password'] = self.password

            self.client.connect(**connect_params)
            self.logger.info(f"SSH connection established to {self.host}:{self.port}")
            return True

        except paramiko.AuthenticationException:
            self.logger.error(f"Authentication failed for {self.host}")
            return False
        except paramiko.SSHException as e:
            self.logger.error(f"SSH connection failed to {self.host}: {e}")
            return False
        except socket.timeout:
            self.logger.error(f"Connection timeout to {self.host}:{self.port}")
            return False
        except OSError as e:
            self.logger.error(f"Unexpected error connecting to {self.host}: {e}")
            return False

    def disconnect(self):
        """Close the SFTP session and the SSH connection"""
        if self._sftp:
            self._sftp.close()
            self._sftp = None
        if self.client:
            self.client.close()
            self.client = None
            self.logger.debug(f"SSH connection closed to {self.host}")

    def _get_sftp(self) -> paramiko.SFTPClient:
        if not self.client:
            raise ConnectionError(f"No SSH connection established to {self.host}")
        if self._sftp is None:
            self._sftp = self.client.open_sftp()
        return self._sftp

    def read_file(self, path: str) -> bytes:
        with self._get_sftp().open(path, 'rb') as f:
            return f.read()

    def list_dir(self, path: str) -> List[str]:
        return self._get_sftp().listdir(path)

    def path_exists(self, path: str) -> bool:
        try:
            self._get_sftp().lstat(path)
        except FileNotFoundError:
            return False
        return True

    def execute_command(self, command: str, timeout: int = None, log_command: bool = True) -> CommandResult:
        """
        Execute a command on the remote host.

        Args:
            command: Command to execute
            timeout: Command timeout (uses connection timeout if None)
            log_command: Whether to log the command being executed

        Returns:
            CommandResult: Command execution result
        """
        if not self.client:
            return CommandResult(False, error="No SSH connection established", command=command)

        if timeout is None:
            timeout = self.timeout

        start_time = time.time()

        try:
            if log_command:
                self.logger.debug(f"Executing: {command}")

            stdin, stdout, stderr = self.client.exec_command(
                command,
                timeout=timeout,
                get_pty=False
            )

            output = stdout.read().decode('utf-8', errors='replace')
            error = stderr.read().decode('utf-8', errors='replace')
            exit_code = stdout.channel.recv_exit_status()

            execution_time = time.time() - start_time

            stdin.close()
            stdout.close()
            stderr.close()

            success = exit_code == 0

            if success:
                self.logger.debug(
                    f"Command '{self._truncate_command(command)}' completed successfully in {execution_time:.2f}s")
            else:
                error_msg = self._format_command_error(command, exit_code, error, execution_time)
                self.logger.warning(error_msg)

            return CommandResult(
                success=success,
                output=output,
                error=error,
                exit_code=exit_code,
                execution_time=execution_time,
                command=command
            )

        except socket.timeout:
            execution_time = time.time() - start_time
            error_msg = f"Command '{self._truncate_command(command)}' timed out after {execution_time:.2f}s (timeout: {timeout}s)"
            self.logger.error(error_msg)
            return CommandResult(False, error=error_msg, execution_time=execution_time, command=command)

        except (paramiko.SSHException, OSError) as e:
            execution_time = time.time() - start_time
            error_msg = f"Command '{self._truncate_command(command)}' execution failed: {str(e)}"
            self.logger.error(error_msg)
            return CommandResult(False, error=error_msg, execution_time=execution_time, command=command)

    def _truncate_command(self, command: str, max_length: int = 80) -> str:
        """Truncate command for logging if it's too long"""
        if len(command) <= max_length:
            return command
        return command[:max_length - 3] + "..."

    def _format_command_error(self, command: str, exit_code: int, error: str, execution_time: float) -> str:
        """Format command error message with context"""
        truncated_cmd = self._truncate_command(command)

        exit_code_meanings = {
            1: "General error",
            2: "Misuse of shell builtin",
            126: "Command not executable",
            127: "Command not found",
            128: "Invalid exit argument",
            130: "Script terminated by Ctrl+C"
        }

        meaning = exit_code_meanings.get(exit_code, "Unknown error")

        error_parts = [f"Command '{truncated_cmd}' failed"]
        error_parts.append(f"exit code {exit_code} ({meaning})")
        error_parts.append(f"time {execution_time:.2f}s")

        if error.strip():
            # Only the first line, stderr can be long
            first_error_line = error.strip().split('\n')[0]
            if first_error_line:
                error_parts.append(f"stderr: {first_error_line}")

        return " | ".join(error_parts)
