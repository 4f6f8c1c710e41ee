# hwinventory/collectors/inventory_collector.py
"""
Inventory Collector
Connects to one system and runs the configured sub-collectors, producing a
single document with one section per sub-collector.
"""

from typing import Dict, Any, List, Optional

from .base_collector import SystemStateCollector
from .sub_collectors import (
    SubCollector,
    TopologySubCollector,
    DMISubCollector,
    NetworkSubCollector
)
from ..connectors import Connector, LocalConnector, SSHConnector
from ..utils.linuxpath import Paths

SUB_COLLECTORS = {
    'topology': TopologySubCollector,
    'dmi': DMISubCollector,
    'network': NetworkSubCollector
}


class InventoryCollector(SystemStateCollector):
    """
    Collects the hardware inventory of a local or SSH-reachable system.

    A failing sub-collector does not fail the collection; its section holds
    an 'error' entry instead.
    """

    def __init__(self, name: str, config: Dict, connector: Optional[Connector] = None):
        super().__init__(name, config)

        self.sections: List[str] = config.get('sections') or list(SUB_COLLECTORS)
        self.warnings_enabled = not config.get('disable_warnings', False)

        # Remote systems are read at their own root
        if config.get('type') == 'ssh':
            self.paths = Paths()
        else:
            self.paths = Paths(config.get('chroot') or '/')

        self.connector = connector or self._create_connector(config)

    def _create_connector(self, config: Dict) -> Connector:
        if config.get('type') == 'ssh':
            return SSHConnector(
                host=self.host,
                port=self.port,
                username=self.username,
                password=config.get('password'),
                ssh_key_path=config.get('ssh_key_path'),
                timeout=self.timeout
            )
        return LocalConnector(timeout=self.timeout)

    def validate_config(self) -> bool:
        """Validate inventory collector configuration"""
        if self.config.get('type') == 'ssh' and not self.host:
            self.logger.error("Host required for SSH inventory collection")
            return False

        unknown = [s for s in self.sections if s not in SUB_COLLECTORS]
        if unknown:
            self.logger.error(f"Unknown sections requested: {', '.join(unknown)}")
            return False
        return True

    def get_system_state(self) -> Dict[str, Any]:
        """
        Collection orchestration:
        1. Connect to system
        2. Run requested sub-collectors
        3. Disconnect
        """
        self.logger.info(f"Connecting to {self.host or 'localhost'}...")
        if not self.connector.connect():
            raise ConnectionError(f"Failed to connect to {self.host}")

        try:
            sections = {}
            for section in self.sections:
                sections[section] = self._run_sub_collector(SUB_COLLECTORS[section])
            return sections
        finally:
            self.connector.disconnect()

    def _run_sub_collector(self, collector_class) -> Dict[str, Any]:
        collector: SubCollector = collector_class(
            self.connector,
            self.name,
            paths=self.paths,
            warnings_enabled=self.warnings_enabled
        )
        try:
            return collector.collect()
        except Exception as e:
            self.logger.error(f"{collector_class.__name__} failed: {e}")
            return {'error': str(e)}
