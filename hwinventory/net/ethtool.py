# hwinventory/net/ethtool.py
"""
Parsers for ethtool output.

`ethtool <iface>` prints link settings such as:

    Settings for eth0:
        Supported ports: [ TP ]
        Supported link modes:   10baseT/Half 10baseT/Full
                                100baseT/Half 100baseT/Full
                                1000baseT/Full
        Supported FEC modes: Not reported
        Speed: 1000Mb/s
        Duplex: Full
        Link detected: yes

`ethtool -k <iface>` prints offload features such as:

    Features for eth0:
    rx-checksumming: on
    tx-checksumming: on
            tx-checksum-ipv4: off [fixed]
"""

from typing import Dict, List

from .nic import NICCapability

_IGNORED_VALUES = ('Not reported', 'Unknown')


def parse_nic_attr_ethtool(output: str) -> Dict[str, List[str]]:
    """
    Parse `ethtool <iface>` output into a mapping of attribute name to values.
    Continuation lines extend the values of the preceding attribute.
    """
    attrs: Dict[str, List[str]] = {}
    name = None
    # First line is the "Settings for <iface>:" header
    for line in output.splitlines()[1:]:
        if ':' in line:
            key, value = line.split(':', 1)
            name = key.strip()
            value = value.strip().strip('[]')
            if value.strip() in _IGNORED_VALUES:
                continue
            fields = value.split()
        else:
            fields = line.strip().strip('[]').split()

        if name is None:
            continue
        for f in fields:
            attrs.setdefault(name, []).append(f.strip())

    return attrs


def parse_ethtool_features(output: str) -> List[NICCapability]:
    """Parse `ethtool -k <iface>` output into NIC capabilities"""
    capabilities = []
    for line in output.splitlines()[1:]:
        if ':' not in line:
            continue
        key, value = line.split(':', 1)
        value = value.strip()
        if not value:
            continue
        capabilities.append(NICCapability(
            name=key.strip(),
            is_enabled=value.split()[0] == 'on',
            can_enable='[fixed]' not in value
        ))
    return capabilities
