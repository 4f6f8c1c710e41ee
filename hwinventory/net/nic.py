# hwinventory/net/nic.py
"""
Network interface records shared by the Linux and Windows collection paths.
"""

from dataclasses import dataclass, field, asdict
from typing import Dict, List, Optional

UNKNOWN_SPEED = 'Unknown!'


@dataclass
class NICCapability:
    name: str
    is_enabled: bool
    can_enable: bool


@dataclass
class NIC:
    name: str
    mac_address: str
    is_virtual: bool
    speed: str = UNKNOWN_SPEED
    duplex: Optional[str] = None
    capabilities: List[NICCapability] = field(default_factory=list)
    supported_link_modes: List[str] = field(default_factory=list)
    advertised_link_modes: List[str] = field(default_factory=list)
    supported_ports: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return asdict(self)

    def __str__(self) -> str:
        kind = 'virtual' if self.is_virtual else 'physical'
        return f"{self.name} ({kind}) {self.mac_address} {self.speed}"
