# tests/test_network.py
"""
Tests for network interface discovery and ethtool parsing.
"""

from types import SimpleNamespace

import pytest

from hwinventory.connectors import CommandResult
from hwinventory.net import UNKNOWN_SPEED, parse_ethtool_features, parse_nic_attr_ethtool
from hwinventory.net import linux as linux_net
from hwinventory.net import windows as windows_net

ETHTOOL_SETTINGS = """Settings for eth0:
\tSupported ports: [ TP ]
\tSupported link modes:   10baseT/Half 10baseT/Full
\t                        100baseT/Half 100baseT/Full
\t                        1000baseT/Full
\tSupported pause frame use: No
\tSupports auto-negotiation: Yes
\tSupported FEC modes: Not reported
\tAdvertised link modes:  10baseT/Half 10baseT/Full
\t                        100baseT/Half 100baseT/Full
\t                        1000baseT/Full
\tAdvertised pause frame use: No
\tAdvertised auto-negotiation: Yes
\tAdvertised FEC modes: Not reported
\tSpeed: 1000Mb/s
\tDuplex: Full
\tAuto-negotiation: on
\tPort: Twisted Pair
\tPHYAD: 1
\tTransceiver: internal
\tMDI-X: off (auto)
\tSupports Wake-on: pumbg
\tWake-on: d
        Current message level: 0x00000007 (7)
                               drv probe link
\tLink detected: yes
"""

ETHTOOL_FEATURES = """Features for eth0:
rx-checksumming: on
tx-checksumming: on
\ttx-checksum-ipv4: off [fixed]
\ttx-checksum-ip-generic: on
scatter-gather: on
tcp-segmentation-offload: off
large-receive-offload: off [fixed]
"""


class TestParseNicAttrEthtool:
    """Tests for `ethtool <iface>` parsing"""

    @pytest.fixture
    def attrs(self):
        return parse_nic_attr_ethtool(ETHTOOL_SETTINGS)

    def test_continuation_lines_extend_values(self, attrs):
        assert attrs['Supported link modes'] == [
            '10baseT/Half', '10baseT/Full',
            '100baseT/Half', '100baseT/Full',
            '1000baseT/Full'
        ]
        assert attrs['Current message level'] == ['0x00000007', '(7)', 'drv', 'probe', 'link']

    def test_brackets_are_trimmed(self, attrs):
        assert attrs['Supported ports'] == ['TP']

    def test_not_reported_values_are_dropped(self, attrs):
        assert 'Supported FEC modes' not in attrs
        assert 'Advertised FEC modes' not in attrs

    def test_scalar_values(self, attrs):
        assert attrs['Speed'] == ['1000Mb/s']
        assert attrs['Link detected'] == ['yes']
        assert attrs['Port'] == ['Twisted', 'Pair']

    def test_header_is_skipped(self, attrs):
        assert not any(key.startswith('Settings for') for key in attrs)

    def test_empty_output(self):
        assert parse_nic_attr_ethtool('') == {}


class TestParseEthtoolFeatures:
    """Tests for `ethtool -k <iface>` parsing"""

    def test_capabilities(self):
        capabilities = {c.name: c for c in parse_ethtool_features(ETHTOOL_FEATURES)}

        assert capabilities['rx-checksumming'].is_enabled is True
        assert capabilities['rx-checksumming'].can_enable is True
        assert capabilities['tx-checksum-ipv4'].is_enabled is False
        assert capabilities['tx-checksum-ipv4'].can_enable is False
        assert capabilities['large-receive-offload'].can_enable is False
        assert len(capabilities) == 7


class TestLinuxNics:
    """Tests for /sys/class/net discovery"""

    def test_sysfs_only(self, sysfs, canned_connector):
        sysfs.add_nic('lo', '00:00:00:00:00:00', physical=False)
        sysfs.add_nic('eth0', '52:54:00:12:34:56', speed='1000', duplex='full')
        sysfs.add_nic('docker0', '02:42:ac:11:00:02', speed='-1', physical=False)

        nics = linux_net.nics(sysfs.paths, canned_connector())

        assert [n.name for n in nics] == ['docker0', 'eth0']
        eth0 = nics[1]
        assert eth0.mac_address == '52:54:00:12:34:56'
        assert eth0.is_virtual is False
        assert eth0.speed == '1000Mb/s'
        assert eth0.duplex == 'full'
        assert eth0.capabilities == []

        docker0 = nics[0]
        assert docker0.is_virtual is True
        assert docker0.speed == UNKNOWN_SPEED
        assert docker0.duplex is None

    def test_with_ethtool(self, sysfs, canned_connector):
        sysfs.add_nic('eth0', '52:54:00:12:34:56', speed='1000', duplex='full')
        connector = canned_connector({
            'which ethtool': CommandResult(True),
            'ethtool -k': CommandResult(True, output=ETHTOOL_FEATURES),
            'ethtool eth0': CommandResult(True, output=ETHTOOL_SETTINGS),
        })

        nic = linux_net.nics(sysfs.paths, connector)[0]

        assert nic.supported_ports == ['TP']
        assert '1000baseT/Full' in nic.supported_link_modes
        assert '1000baseT/Full' in nic.advertised_link_modes
        assert any(c.name == 'scatter-gather' and c.is_enabled for c in nic.capabilities)

    def test_ethtool_failure_is_reported(self, sysfs, canned_connector, warnings_log):
        sysfs.add_nic('eth0', '52:54:00:12:34:56')
        connector = canned_connector({'which ethtool': CommandResult(True)})

        nic = linux_net.nics(sysfs.paths, connector, warnings_log.append)[0]

        assert nic.supported_link_modes == []
        assert len(warnings_log) == 2

    def test_missing_net_class_raises(self, sysfs, canned_connector):
        with pytest.raises(FileNotFoundError):
            linux_net.nics(sysfs.paths, canned_connector())


class TestWindowsNics:
    """Tests for Win32_NetworkAdapter row mapping"""

    @staticmethod
    def _adapter(**fields):
        defaults = {
            'Description': 'Intel(R) Ethernet Connection I219-V',
            'NetConnectionID': 'Ethernet',
            'MACAddress': '3C:7C:3F:00:11:22',
            'PhysicalAdapter': True,
            'Speed': '1000000000',
        }
        defaults.update(fields)
        return SimpleNamespace(**defaults)

    def test_physical_adapter(self):
        nic = windows_net.nics_from_adapters([self._adapter()])[0]

        assert nic.name == 'Ethernet'
        assert nic.mac_address == '3C:7C:3F:00:11:22'
        assert nic.is_virtual is False
        assert nic.speed == '1000Mb/s'

    def test_blank_connection_id_uses_description(self):
        nic = windows_net.nics_from_adapters([self._adapter(NetConnectionID='  ')])[0]
        assert nic.name == 'Intel(R) Ethernet Connection I219-V'

    def test_virtual_adapter(self):
        nic = windows_net.nics_from_adapters([self._adapter(PhysicalAdapter=False)])[0]
        assert nic.is_virtual is True

    def test_unknown_physical_flag_is_not_virtual(self):
        nic = windows_net.nics_from_adapters([self._adapter(PhysicalAdapter=None)])[0]
        assert nic.is_virtual is False

    def test_null_speed(self):
        nic = windows_net.nics_from_adapters([self._adapter(Speed=None)])[0]
        assert nic.speed == UNKNOWN_SPEED

    def test_nics_uses_wmi_query(self, monkeypatch):
        monkeypatch.setattr(windows_net, 'query_network_adapters',
                            lambda: [self._adapter(), self._adapter(NetConnectionID='Wi-Fi', Speed=None)])

        nics = windows_net.nics()

        assert [n.name for n in nics] == ['Ethernet', 'Wi-Fi']


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
