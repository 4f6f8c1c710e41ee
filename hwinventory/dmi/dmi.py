# hwinventory/dmi/dmi.py
"""
DMI/SMBIOS identifiers exposed under /sys/class/dmi/id.
Every field is a single file; unreadable fields are reported as UNKNOWN.
"""

import logging
import posixpath
from dataclasses import dataclass, asdict
from typing import Dict, Optional

from ..connectors import Connector, LocalConnector
from ..utils.linuxpath import Paths
from ..utils.logging_config import WarnFunc

logger = logging.getLogger('dmi')

UNKNOWN = 'unknown'

# SMBIOS 3.x, table 17 (System Enclosure or Chassis Types)
CHASSIS_TYPE_DESCRIPTIONS = {
    '1': 'Other',
    '2': 'Unknown',
    '3': 'Desktop',
    '4': 'Low profile desktop',
    '5': 'Pizza box',
    '6': 'Mini tower',
    '7': 'Tower',
    '8': 'Portable',
    '9': 'Laptop',
    '10': 'Notebook',
    '11': 'Hand held',
    '12': 'Docking station',
    '13': 'All in one',
    '14': 'Sub notebook',
    '15': 'Space-saving',
    '16': 'Lunch box',
    '17': 'Main server chassis',
    '18': 'Expansion chassis',
    '19': 'SubChassis',
    '20': 'Bus Expansion chassis',
    '21': 'Peripheral chassis',
    '22': 'RAID chassis',
    '23': 'Rack mount chassis',
    '24': 'Sealed-case PC',
    '25': 'Multi-system chassis',
    '26': 'Compact PCI',
    '27': 'Advanced TCA',
    '28': 'Blade',
    '29': 'Blade enclosure',
    '30': 'Tablet',
    '31': 'Convertible',
    '32': 'Detachable',
    '33': 'IoT gateway',
    '34': 'Embedded PC',
    '35': 'Mini PC',
    '36': 'Stick PC',
}


@dataclass
class BIOSInfo:
    vendor: str
    version: str
    date: str

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass
class BaseboardInfo:
    asset_tag: str
    serial_number: str
    vendor: str
    version: str
    product: str

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass
class ChassisInfo:
    asset_tag: str
    serial_number: str
    type: str
    vendor: str
    version: str

    @property
    def type_description(self) -> str:
        return CHASSIS_TYPE_DESCRIPTIONS.get(self.type, UNKNOWN)

    def to_dict(self) -> Dict:
        data = asdict(self)
        data['type_description'] = self.type_description
        return data


@dataclass
class ProductInfo:
    family: str
    name: str
    serial_number: str
    uuid: str
    sku: str
    vendor: str
    version: str

    def to_dict(self) -> Dict:
        return asdict(self)


class DMIReader:
    """Reads /sys/class/dmi/id fields through a connector"""

    def __init__(self, paths: Optional[Paths] = None, connector: Optional[Connector] = None,
                 warn: Optional[WarnFunc] = None):
        self.paths = paths or Paths.from_env()
        self.connector = connector or LocalConnector()
        self.warn = warn if warn is not None else logger.warning

    def item(self, value: str) -> str:
        """Return the trimmed contents of one DMI field, or UNKNOWN"""
        path = posixpath.join(self.paths.sys_class_dmi, 'id', value)
        try:
            contents = self.connector.read_file(path)
        except OSError as e:
            self.warn(f"Unable to read {value}: {e}")
            return UNKNOWN
        return contents.decode('utf-8', errors='replace').strip()

    def bios(self) -> BIOSInfo:
        return BIOSInfo(
            vendor=self.item('bios_vendor'),
            version=self.item('bios_version'),
            date=self.item('bios_date')
        )

    def baseboard(self) -> BaseboardInfo:
        return BaseboardInfo(
            asset_tag=self.item('board_asset_tag'),
            serial_number=self.item('board_serial'),
            vendor=self.item('board_vendor'),
            version=self.item('board_version'),
            product=self.item('board_name')
        )

    def chassis(self) -> ChassisInfo:
        return ChassisInfo(
            asset_tag=self.item('chassis_asset_tag'),
            serial_number=self.item('chassis_serial'),
            type=self.item('chassis_type'),
            vendor=self.item('chassis_vendor'),
            version=self.item('chassis_version')
        )

    def product(self) -> ProductInfo:
        return ProductInfo(
            family=self.item('product_family'),
            name=self.item('product_name'),
            serial_number=self.item('product_serial'),
            uuid=self.item('product_uuid'),
            sku=self.item('product_sku'),
            vendor=self.item('sys_vendor'),
            version=self.item('product_version')
        )


def dmi_item(value: str, paths: Optional[Paths] = None, connector: Optional[Connector] = None,
             warn: Optional[WarnFunc] = None) -> str:
    """Convenience function to read a single DMI field"""
    return DMIReader(paths, connector, warn).item(value)
