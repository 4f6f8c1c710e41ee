# hwinventory/collectors/sub_collectors/dmi_sub_collector.py
"""
DMI Sub-Collector
Collects BIOS, baseboard, chassis and product identifiers.
"""

from typing import Dict, Any
from .base_sub_collector import SubCollector
from ...dmi import DMIReader


class DMISubCollector(SubCollector):
    """
    Collects DMI/SMBIOS identifiers from /sys/class/dmi/id.

    Returns data in 'dmi' section.
    """

    def get_section_name(self) -> str:
        return "dmi"

    def collect(self) -> Dict[str, Any]:
        self.log_start()

        reader = DMIReader(self.paths, self.connector, self.warn)
        dmi_data = {
            'bios': reader.bios().to_dict(),
            'baseboard': reader.baseboard().to_dict(),
            'chassis': reader.chassis().to_dict(),
            'product': reader.product().to_dict()
        }

        self.log_end()
        return dmi_data
