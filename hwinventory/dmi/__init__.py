# hwinventory/dmi/__init__.py
"""
DMI/SMBIOS identifiers (BIOS, baseboard, chassis, product).
"""

from .dmi import (
    UNKNOWN,
    BIOSInfo,
    BaseboardInfo,
    ChassisInfo,
    ProductInfo,
    DMIReader,
    dmi_item
)

__all__ = [
    'UNKNOWN',
    'BIOSInfo',
    'BaseboardInfo',
    'ChassisInfo',
    'ProductInfo',
    'DMIReader',
    'dmi_item'
]
