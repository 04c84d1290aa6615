"""
RISC-V vendor definitions for the report banner.

To add a vendor, append an entry to VENDORS. The first entry is the
default banner.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Vendor:
    """Banner identity for a vendor"""
    aliases: Tuple[str, ...]  # lowercase; first one is primary
    display_name: str
    subtitle: str


VENDORS: Tuple[Vendor, ...] = (
    # Default
    Vendor(('default', 'riscv', 'risc-v'), "RISC-V", "Architecture Info"),
    # Major IP/SoC providers
    Vendor(('sifive',), "SiFive", "RISC-V by SiFive"),
    Vendor(('starfive',), "StarFive", "RISC-V by StarFive"),
    Vendor(('thead', 't-head', 'alibaba'), "T-Head", "RISC-V by T-Head"),
    # Board manufacturers
    Vendor(('milkv', 'milk-v'), "Milk-V", "RISC-V by Milk-V"),
    Vendor(('sipeed',), "Sipeed", "RISC-V by Sipeed"),
    Vendor(('pine64', 'pine'), "Pine64", "RISC-V by Pine64"),
    # SoC vendors
    Vendor(('kendryte', 'canaan'), "Kendryte", "RISC-V by Kendryte"),
    Vendor(('allwinner',), "Allwinner", "RISC-V by Allwinner"),
    Vendor(('espressif', 'esp'), "Espressif", "RISC-V by Espressif"),
    Vendor(('spacemit',), "SpacemiT", "RISC-V by SpacemiT"),
    Vendor(('sophgo',), "Sophgo", "RISC-V by Sophgo"),
    # MCU vendors
    Vendor(('wch', 'winchiphead'), "WCH", "RISC-V by WCH"),
)


def get_vendor_info(alias: str) -> Optional[Vendor]:
    """Vendor for a CLI alias (case-insensitive), None if unknown"""
    alias_lower = alias.lower()
    for vendor in VENDORS:
        if alias_lower in vendor.aliases:
            return vendor
    return None


def get_default_vendor() -> Vendor:
    return VENDORS[0]


def vendor_aliases() -> Tuple[str, ...]:
    """Primary alias of every vendor, for --help text"""
    return tuple(vendor.aliases[0] for vendor in VENDORS)
