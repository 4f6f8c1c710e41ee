# hwinventory/config/__init__.py
"""
Configuration loading for hardware inventory collection.
"""

from .settings import (
    SystemConfig,
    CollectionConfig,
    LoggingSettings,
    ConfigManager,
    get_config,
    initialize_config
)

__all__ = [
    'SystemConfig',
    'CollectionConfig',
    'LoggingSettings',
    'ConfigManager',
    'get_config',
    'initialize_config'
]
