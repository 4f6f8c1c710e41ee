# hwinventory/net/linux.py
"""
Linux network interfaces from /sys/class/net, enriched with ethtool output
when ethtool is installed.
"""

import logging
import posixpath
import shlex
from typing import List, Optional

from ..connectors import Connector, LocalConnector
from ..utils.linuxpath import Paths
from ..utils.logging_config import WarnFunc
from .ethtool import parse_ethtool_features, parse_nic_attr_ethtool
from .nic import NIC, UNKNOWN_SPEED

logger = logging.getLogger('net.linux')


def _read_attr(connector: Connector, path: str) -> Optional[str]:
    try:
        return connector.read_file(path).decode('utf-8', errors='replace').strip()
    except OSError:
        return None


def _link_speed(raw: Optional[str]) -> str:
    # Down links report -1 or fail to read
    try:
        speed = int(raw)
    except (TypeError, ValueError):
        return UNKNOWN_SPEED
    if speed < 0:
        return UNKNOWN_SPEED
    return f"{speed}Mb/s"


def nics(paths: Optional[Paths] = None, connector: Optional[Connector] = None,
         warn: Optional[WarnFunc] = None) -> List[NIC]:
    """
    Describe every non-loopback interface under /sys/class/net.

    Raises:
        OSError: if /sys/class/net cannot be listed
    """
    paths = paths or Paths.from_env()
    connector = connector or LocalConnector()
    warn = warn if warn is not None else logger.warning

    use_ethtool = connector.check_command_availability('ethtool')
    if not use_ethtool:
        logger.debug("ethtool not available, skipping link mode and feature discovery")

    result = []
    for name in sorted(connector.list_dir(paths.sys_class_net)):
        if name == 'lo':
            continue
        iface_path = posixpath.join(paths.sys_class_net, name)

        mac_address = _read_attr(connector, posixpath.join(iface_path, 'address'))
        if mac_address is None:
            warn(f"Unable to read MAC address for {name}")
            mac_address = ''

        nic = NIC(
            name=name,
            mac_address=mac_address,
            is_virtual=not connector.path_exists(posixpath.join(iface_path, 'device')),
            speed=_link_speed(_read_attr(connector, posixpath.join(iface_path, 'speed'))),
            duplex=_read_attr(connector, posixpath.join(iface_path, 'duplex'))
        )

        if use_ethtool:
            _add_ethtool_details(nic, connector, warn)

        result.append(nic)

    return result


def _add_ethtool_details(nic: NIC, connector: Connector, warn: WarnFunc):
    iface = shlex.quote(nic.name)

    settings = connector.execute_command(f"ethtool {iface}", log_command=False)
    if settings.success:
        attrs = parse_nic_attr_ethtool(settings.output)
        nic.supported_link_modes = attrs.get('Supported link modes', [])
        nic.advertised_link_modes = attrs.get('Advertised link modes', [])
        nic.supported_ports = attrs.get('Supported ports', [])
    else:
        warn(f"Unable to get link settings for {nic.name}: {settings.error.strip()}")

    features = connector.execute_command(f"ethtool -k {iface}", log_command=False)
    if features.success:
        nic.capabilities = parse_ethtool_features(features.output)
    else:
        warn(f"Unable to get features for {nic.name}: {features.error.strip()}")
