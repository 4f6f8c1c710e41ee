# hwinventory/collectors/__init__.py
"""
Collectors that assemble a hardware inventory document per system.
"""

from .base_collector import BaseCollector, SystemStateCollector, CollectionResult
from .inventory_collector import InventoryCollector, SUB_COLLECTORS

__all__ = [
    'BaseCollector',
    'SystemStateCollector',
    'CollectionResult',
    'InventoryCollector',
    'SUB_COLLECTORS'
]
