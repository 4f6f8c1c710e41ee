# hwinventory/collectors/base_collector.py
"""
Base collector class that all system collectors inherit from.
Provides common functionality for result metadata, error handling and output.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any
import logging
import json
from datetime import datetime
from pathlib import Path

import yaml


class CollectionResult:
    """Container for collection results with metadata"""

    def __init__(self, success: bool, data: Any = None, error: str = None, metadata: Dict = None):
        self.success = success
        self.data = data
        self.error = error
        self.metadata = metadata or {}
        self.timestamp = datetime.now().isoformat()

    def to_dict(self) -> Dict:
        """Convert result to dictionary for serialization"""
        return {
            'success': self.success,
            'data': self.data,
            'error': self.error,
            'metadata': self.metadata,
            'timestamp': self.timestamp
        }

    def dumps(self, output_format: str = 'json') -> str:
        """Serialize the result as JSON or YAML"""
        if output_format == 'yaml':
            return yaml.safe_dump(self.to_dict(), default_flow_style=False, sort_keys=False)
        return json.dumps(self.to_dict(), indent=2, default=str)


class BaseCollector(ABC):
    """
    Abstract base class for all system collectors.

    Each collector gathers hardware inventory from one target system.
    """

    def __init__(self, name: str, config: Dict):
        self.name = name
        self.config = config
        self.logger = logging.getLogger(f"collector.{name}")

        self.host = config.get('host')
        self.port = config.get('port', 22)
        self.username = config.get('username', 'root')
        self.timeout = config.get('timeout', 30)

    @abstractmethod
    def collect(self) -> CollectionResult:
        """
        Main collection method that each collector must implement.

        Returns:
            CollectionResult: Success/failure status with collected data
        """
        pass

    @abstractmethod
    def validate_config(self) -> bool:
        """
        Validate that the collector has all required configuration.

        Returns:
            bool: True if configuration is valid
        """
        pass

    def get_connection_info(self) -> Dict:
        """Get connection information for logging/debugging"""
        return {
            'host': self.host or 'localhost',
            'port': self.port,
            'username': self.username,
            'collector_type': self.__class__.__name__
        }

    def log_collection_start(self):
        """Log the start of collection process"""
        self.logger.info(f"Starting collection from {self.host or 'localhost'}")

    def log_collection_end(self, result: CollectionResult):
        """Log the end of collection process"""
        if result.success:
            self.logger.info("Collection completed successfully")
        else:
            self.logger.error(f"Collection failed: {result.error}")

    def log_collection_progress(self, step: str, detail: str = None):
        """Log collection progress"""
        if detail:
            self.logger.debug(f"[{step}] {detail}")
        else:
            self.logger.debug(f"Starting: {step}")

    def handle_collection_error(self, error: Exception, context: str = "") -> CollectionResult:
        """Handle collection errors with consistent logging"""
        context_prefix = f"[{context}] " if context else ""
        error_msg = f"{context_prefix}Collection failed: {str(error)}"

        self.logger.exception(error_msg)

        return CollectionResult(
            success=False,
            error=error_msg,
            metadata={
                'collector_type': self.__class__.__name__,
                'connection_info': self.get_connection_info(),
                'error_context': context
            }
        )

    def save_raw_data(self, result: CollectionResult, filename: str, output_dir: Path,
                      output_format: str = 'json'):
        """Save a collection result to a file"""
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
            output_file = output_dir / filename

            with open(output_file, 'w') as f:
                f.write(result.dumps(output_format))

            self.logger.debug(f"Saved raw data to {output_file}")

        except OSError as e:
            self.logger.error(f"Failed to save raw data to {filename}: {e}")

    def create_metadata(self, additional_metadata: Dict = None) -> Dict:
        """Create standard metadata for collection results"""
        metadata = {
            'collector_type': self.__class__.__name__,
            'connection_info': self.get_connection_info(),
            'collection_timestamp': datetime.now().isoformat()
        }

        if additional_metadata:
            metadata.update(additional_metadata)

        return metadata


class SystemStateCollector(BaseCollector):
    """
    Base class for collectors that gather hardware state as a dict of sections.
    """

    @abstractmethod
    def get_system_state(self) -> Dict[str, Any]:
        """
        Get current hardware inventory.

        Returns:
            Dict[str, Any]: Section name to section data
        """
        pass

    def collect(self) -> CollectionResult:
        """Collect system state information"""
        try:
            self.log_collection_start()

            if not self.validate_config():
                return CollectionResult(
                    False,
                    error="Invalid configuration",
                    metadata=self.create_metadata()
                )

            self.log_collection_progress("system_state", "Getting hardware inventory")
            system_state = self.get_system_state()

            if not system_state:
                self.logger.warning("No system state data collected")
                return CollectionResult(
                    success=True,
                    data={},
                    metadata=self.create_metadata({'data_sections': 0})
                )

            result = CollectionResult(
                success=True,
                data=system_state,
                metadata=self.create_metadata({
                    'data_sections': len(system_state),
                    'data_keys': list(system_state.keys())
                })
            )

            self.log_collection_end(result)
            return result

        except Exception as e:
            return self.handle_collection_error(e, "system state collection")
