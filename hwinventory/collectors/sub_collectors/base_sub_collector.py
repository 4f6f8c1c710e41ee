# hwinventory/collectors/sub_collectors/base_sub_collector.py
"""
Base class for all sub-collectors.
Sub-collectors focus on one inventory section (topology, DMI, network).
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional
import logging

from ...utils.linuxpath import Paths
from ...utils.logging_config import get_warn_func


class SubCollector(ABC):
    """
    Abstract base class for all sub-collectors.

    Sub-collectors are lightweight components that collect specific data sections.
    Unlike full collectors, they:
    - Don't manage connections (receive a connected Connector)
    - Return data dictionaries (not CollectionResult objects)
    - Are orchestrated by InventoryCollector
    """

    def __init__(self, connector, system_name: str, paths: Optional[Paths] = None, warnings_enabled: bool = True):
        """
        Initialize sub-collector

        Args:
            connector: Already-connected Connector instance
            system_name: Name of the system being collected from
            paths: sysfs locations on that system
            warnings_enabled: Whether degraded reads are logged
        """
        self.connector = connector
        self.system_name = system_name
        self.paths = paths or Paths()
        self.logger = logging.getLogger(f"subcollector.{self.__class__.__name__}")
        self.warn = get_warn_func(self.logger, warnings_enabled)

    @abstractmethod
    def collect(self) -> Dict[str, Any]:
        """
        Collect data section.

        Returns:
            Dict containing collected data for this sub-collector's domain.

        Raises:
            Exception: If collection fails
        """
        pass

    @abstractmethod
    def get_section_name(self) -> str:
        """Name of the section this sub-collector produces"""
        pass

    def log_start(self):
        """Log the start of collection"""
        self.logger.info(f"Starting {self.get_section_name()} collection for {self.system_name}")

    def log_end(self, item_count: int = None):
        """Log the end of collection"""
        if item_count is not None:
            self.logger.info(f"Completed {self.get_section_name()} collection: {item_count} items")
        else:
            self.logger.info(f"Completed {self.get_section_name()} collection")
