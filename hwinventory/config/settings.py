# hwinventory/config/settings.py
"""
Configuration management for hardware inventory collection.
"""

import os
import yaml
from pathlib import Path
from typing import Dict, List, Any, Optional
from dataclasses import dataclass, field
import logging

from ..utils.linuxpath import CHROOT_ENV

DISABLE_WARNINGS_ENV = 'HWINVENTORY_DISABLE_WARNINGS'

VALID_SECTIONS = ('topology', 'dmi', 'network')
VALID_OUTPUT_FORMATS = ('json', 'yaml')


@dataclass
class SystemConfig:
    """Configuration for a target system"""
    name: str
    type: str = 'local'  # 'local', 'ssh'
    host: Optional[str] = None
    port: int = 22
    username: str = 'root'
    ssh_key_path: Optional[str] = None
    password_env: Optional[str] = None
    password: Optional[str] = None
    chroot: str = '/'
    enabled: bool = True
    timeout: int = 30

    def __post_init__(self):
        """Validate configuration after initialization"""
        if self.type not in ('local', 'ssh'):
            raise ValueError(f"Unknown system type '{self.type}' for system {self.name}")

        if self.type == 'ssh' and not self.host:
            raise ValueError(f"Host required for system {self.name}")


@dataclass
class CollectionConfig:
    """Collection behavior configuration"""
    sections: List[str] = field(default_factory=lambda: list(VALID_SECTIONS))
    output_format: str = 'json'  # 'json', 'yaml'
    disable_warnings: bool = False

    def __post_init__(self):
        unknown = [s for s in self.sections if s not in VALID_SECTIONS]
        if unknown:
            raise ValueError(f"Unknown sections: {', '.join(unknown)}")

        if self.output_format not in VALID_OUTPUT_FORMATS:
            raise ValueError(f"Unknown output format '{self.output_format}'")


@dataclass
class LoggingSettings:
    level: str = 'INFO'
    log_to_file: bool = False
    log_dir: str = 'logs'


class ConfigManager:
    """Loads inventory configuration from YAML with environment overrides"""

    def __init__(self, config_file: str = None):
        self.logger = logging.getLogger('config_manager')

        if config_file:
            self.config_file = Path(config_file)
        else:
            self.config_file = self._find_config_file()

        self.systems: List[SystemConfig] = []
        self.collection_config = CollectionConfig()
        self.logging_settings = LoggingSettings()

        self._load_config()

    def _find_config_file(self) -> Optional[Path]:
        """Find configuration file in standard locations"""
        possible_locations = [
            Path('config/inventory.yml'),
            Path('inventory.yml'),
            Path.home() / '.config' / 'hwinventory' / 'inventory.yml'
        ]

        for location in possible_locations:
            if location.exists():
                self.logger.info(f"Found config file at {location}")
                return location

        self.logger.debug("No config file found, using defaults")
        return None

    def _load_config(self):
        """Load configuration from file, then apply environment overrides"""
        config_data: Dict[str, Any] = {}

        if self.config_file is not None:
            try:
                with open(self.config_file, 'r') as f:
                    config_data = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                self.logger.error(f"Failed to load configuration: {e}")
                raise

        collection_data = config_data.get('collection', {})
        self.collection_config = CollectionConfig(**collection_data)

        logging_data = config_data.get('logging', {})
        self.logging_settings = LoggingSettings(**logging_data)

        self._load_systems_config(config_data.get('systems', []))
        self._apply_env_overrides()

        self.logger.info(f"Loaded configuration for {len(self.systems)} systems")

    def _load_systems_config(self, systems_data: List[Dict]):
        """Load systems configuration; a local system is used when none is configured"""
        self.systems = []

        for system_data in systems_data:
            try:
                if system_data.get('password_env'):
                    system_data['password'] = os.getenv(system_data['password_env'])

                system_config = SystemConfig(**system_data)

                if system_config.enabled:
                    self.systems.append(system_config)

            except (TypeError, ValueError) as e:
                self.logger.error(f"Invalid system configuration: {e}")
                continue

        if not systems_data:
            self.systems.append(SystemConfig(name='localhost'))

    def _apply_env_overrides(self):
        chroot = os.getenv(CHROOT_ENV)
        if chroot:
            for system in self.systems:
                if system.type == 'local':
                    system.chroot = chroot

        if os.getenv(DISABLE_WARNINGS_ENV):
            self.collection_config.disable_warnings = True

    def get_enabled_systems(self) -> List[SystemConfig]:
        """Get all enabled systems"""
        return [system for system in self.systems if system.enabled]

    def validate_configuration(self) -> bool:
        """Validate the entire configuration"""
        if not self.systems:
            self.logger.error("No systems configured")
            return False

        for system in self.systems:
            if system.ssh_key_path and not Path(system.ssh_key_path).expanduser().exists():
                self.logger.warning(f"SSH key not found for {system.name}: {system.ssh_key_path}")

            if system.type == 'local' and not Path(system.chroot).is_dir():
                self.logger.error(f"Root directory not found for {system.name}: {system.chroot}")
                return False

        return True


# Global configuration instance
config_manager = None


def get_config() -> ConfigManager:
    """Get global configuration manager instance"""
    global config_manager
    if config_manager is None:
        config_manager = ConfigManager()
    return config_manager


def initialize_config(config_file: str = None) -> ConfigManager:
    """Initialize configuration manager with specific config file"""
    global config_manager
    config_manager = ConfigManager(config_file)
    return config_manager
