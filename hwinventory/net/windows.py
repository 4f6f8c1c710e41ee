# hwinventory/net/windows.py
"""
Windows network adapters from the Win32_NetworkAdapter WMI class.
"""

import logging
from typing import Any, Iterable, List

from .nic import NIC, UNKNOWN_SPEED

logger = logging.getLogger('net.windows')

WQL_NETWORK_ADAPTER = (
    "SELECT Description, DeviceID, Index, InterfaceIndex, MACAddress, Manufacturer, "
    "Name, NetConnectionID, ProductName, ServiceName, PhysicalAdapter, Speed "
    "FROM Win32_NetworkAdapter"
)


def query_network_adapters() -> List[Any]:
    """Run the adapter query against the local WMI service"""
    import wmi  # Windows only

    return wmi.WMI().query(WQL_NETWORK_ADAPTER)


def net_device_name(adapter) -> str:
    connection_id = getattr(adapter, 'NetConnectionID', None)
    if connection_id and connection_id.strip():
        return connection_id
    return getattr(adapter, 'Description', None) or ''


def net_is_virtual(adapter) -> bool:
    physical = getattr(adapter, 'PhysicalAdapter', None)
    if physical is None:
        return False
    return not physical


def net_speed(adapter) -> str:
    # WMI reports bits per second, sometimes as a string
    speed = getattr(adapter, 'Speed', None)
    if speed is None:
        return UNKNOWN_SPEED
    try:
        return f"{int(speed) // 1_000_000}Mb/s"
    except (TypeError, ValueError):
        return UNKNOWN_SPEED


def nics_from_adapters(adapters: Iterable[Any]) -> List[NIC]:
    """Map Win32_NetworkAdapter rows to NIC records"""
    return [
        NIC(
            name=net_device_name(adapter),
            mac_address=getattr(adapter, 'MACAddress', None) or '',
            is_virtual=net_is_virtual(adapter),
            speed=net_speed(adapter)
        )
        for adapter in adapters
    ]


def nics() -> List[NIC]:
    adapters = query_network_adapters()
    logger.debug(f"WMI returned {len(adapters)} network adapters")
    return nics_from_adapters(adapters)
