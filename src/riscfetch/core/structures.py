"""
Data structures for RISC-V ISA classification and system reports.

This module defines the records shared by the parser, the projection layer
and the reporting backends:
- Namespace: which named-extension table (Z or S) an operation targets
- BaseExtension / NamedExtension: static catalog entries
- ClassifiedExtension: a catalog entry attached to a detection result
- HardwareIds, VectorInfo, CacheInfo: per-hart hardware facts
- RiscvInfo / SystemInfo: complete reports for structured output
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class Namespace(Enum):
    """Named-extension namespaces"""
    Z = "z"  # Unprivileged extensions (Zba, Zicsr, ...)
    S = "s"  # Privileged/supervisor extensions (Sstc, Svpbmt, ...)


@dataclass(frozen=True)
class BaseExtension:
    """Single-letter base extension (I, M, A, ...)"""
    code: str  # lowercase letter as it appears in the ISA string
    name: str  # canonical display letter
    description: str


@dataclass(frozen=True)
class NamedExtension:
    """Multi-letter Z/S extension catalog entry"""
    pattern: str  # lowercase match pattern
    name: str
    description: str
    category: str


@dataclass
class ClassifiedExtension:
    """An extension together with its detection status"""
    name: str
    description: str
    category: str
    supported: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'description': self.description,
            'category': self.category,
            'supported': self.supported,
        }


@dataclass
class HardwareIds:
    """Machine identification CSRs as reported by the kernel"""
    mvendorid: str = ""
    marchid: str = ""
    mimpid: str = ""

    def is_empty(self) -> bool:
        return not (self.mvendorid or self.marchid or self.mimpid)

    def to_dict(self) -> Dict[str, str]:
        return {
            'mvendorid': self.mvendorid,
            'marchid': self.marchid,
            'mimpid': self.mimpid,
        }


@dataclass
class VectorInfo:
    """Vector unit capabilities"""
    enabled: bool = False
    vlen: Optional[int] = None  # Guaranteed minimum VLEN from zvl*b, or sysfs value
    elen: Optional[int] = None
    detail: Optional[str] = None  # e.g. "Enabled, VLEN>=256"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'enabled': self.enabled,
            'vlen': self.vlen,
            'elen': self.elen,
        }


@dataclass
class CacheInfo:
    """Cache sizes of hart 0 as reported by sysfs (e.g. "32K")"""
    l1d: Optional[str] = None
    l1i: Optional[str] = None
    l2: Optional[str] = None
    l3: Optional[str] = None

    def is_empty(self) -> bool:
        return not any((self.l1d, self.l1i, self.l2, self.l3))

    def summary(self) -> str:
        """Compact form used by the terminal renderer: "L1D:32K L1I:32K L2:1024K" """
        parts = []
        for label, size in (('L1D', self.l1d), ('L1I', self.l1i), ('L2', self.l2), ('L3', self.l3)):
            if size:
                parts.append(f"{label}:{size}")
        return " ".join(parts)

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            'l1d': self.l1d,
            'l1i': self.l1i,
            'l2': self.l2,
            'l3': self.l3,
        }


@dataclass
class RiscvInfo:
    """RISC-V specific information only (no generic host data)"""
    isa: str
    extensions: List[str] = field(default_factory=list)
    z_extensions: List[str] = field(default_factory=list)
    s_extensions: List[str] = field(default_factory=list)
    vector: VectorInfo = field(default_factory=VectorInfo)
    hart_count: int = 0
    hardware_ids: HardwareIds = field(default_factory=HardwareIds)
    cache: CacheInfo = field(default_factory=CacheInfo)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'isa': self.isa,
            'extensions': list(self.extensions),
            'z_extensions': list(self.z_extensions),
            's_extensions': list(self.s_extensions),
            'vector': self.vector.to_dict(),
            'hart_count': self.hart_count,
            'hardware_ids': self.hardware_ids.to_dict(),
            'cache': self.cache.to_dict(),
        }


@dataclass
class SystemInfo(RiscvInfo):
    """Complete report: RISC-V data plus board and host metrics"""
    board: str = ""
    memory_used_bytes: int = 0
    memory_total_bytes: int = 0
    kernel: str = "Unknown"
    os: str = "Linux"
    uptime_seconds: int = 0

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d.update({
            'board': self.board,
            'memory_used_bytes': self.memory_used_bytes,
            'memory_total_bytes': self.memory_total_bytes,
            'kernel': self.kernel,
            'os': self.os,
            'uptime_seconds': self.uptime_seconds,
        })
        return d
