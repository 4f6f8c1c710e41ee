# hwinventory/collectors/sub_collectors/network_sub_collector.py
"""
Network Sub-Collector
Collects network interface descriptors.
"""

from typing import Dict, Any
from .base_sub_collector import SubCollector
from ...net import linux as linux_net
from ...net import windows as windows_net


class NetworkSubCollector(SubCollector):
    """
    Collects network interfaces: sysfs and ethtool on Linux, WMI on Windows.

    Returns data in 'network' section.
    """

    def get_section_name(self) -> str:
        return "network"

    def collect(self) -> Dict[str, Any]:
        """
        Collect network information

        Returns:
            Dict containing:
                - nics: one entry per interface, loopback excluded
                - source: 'sysfs' or 'wmi'
        """
        self.log_start()

        if self.connector.platform == 'windows':
            nics = windows_net.nics()
            source = 'wmi'
        else:
            nics = linux_net.nics(self.paths, self.connector, self.warn)
            source = 'sysfs'

        self.log_end(len(nics))
        return {
            'source': source,
            'nics': [nic.to_dict() for nic in nics]
        }
