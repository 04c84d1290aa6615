"""
RISC-V Hardware Detection Module

Reads RISC-V specific facts from the Linux pseudo-filesystems:
- /proc/cpuinfo: ISA string, hart count, mvendorid/marchid/mimpid
- /sys/devices/system/cpu/cpu0/cache: cache sizes
- /sys/devices/system/cpu/cpu0/riscv/vlen: actual vector length
- /proc/device-tree: board model / compatible strings

Every reader returns a documented default ("unknown", "", None, 0) when
the file is missing or unreadable, so the parsing core always receives a
valid string.

Uses psutil for the hart count when /proc/cpuinfo has no processor entries.
"""

import logging
import platform
import subprocess
from pathlib import Path
from typing import Dict, List, Optional

import psutil

from ..config import FetchConfig
from ..core.parsing import has_vector, parse_elen, parse_vector_detail, parse_vlen
from ..core.parsing import parse_base_extensions_explained, parse_named_extensions_with_category
from ..core.projection import extension_names
from ..core.structures import CacheInfo, HardwareIds, Namespace, RiscvInfo, SystemInfo, VectorInfo
from . import system


logger = logging.getLogger(__name__)

UNKNOWN_ISA = "unknown"

# sysfs cache index -> CacheInfo field
CACHE_INDEXES = {
    'index0': 'l1d',
    'index1': 'l1i',
    'index2': 'l2',
    'index3': 'l3',
}


def _read_text(path: Path) -> Optional[str]:
    """Read a pseudo-file, None if it does not exist or cannot be read"""
    try:
        return path.read_text(errors='replace')
    except OSError as e:
        logger.debug("Cannot read %s: %s", path, e)
        return None


def _cpuinfo_value(line: str) -> str:
    return line.split(':', 1)[1].strip() if ':' in line else ""


class RiscvDetector:
    """
    RISC-V hardware detector.

    All paths are taken from FetchConfig so the detector can be pointed
    at a captured filesystem tree.
    """

    def __init__(self, config: Optional[FetchConfig] = None):
        self.config = config or FetchConfig()
        self.platform_arch = platform.machine().lower()

    # ========================================================================
    # Architecture check
    # ========================================================================

    def _uname_machine(self) -> str:
        try:
            result = subprocess.run(
                ['uname', '-m'],
                capture_output=True,
                text=True,
                timeout=self.config.command_timeout
            )
        except (subprocess.SubprocessError, OSError) as e:
            logger.debug("uname -m failed: %s", e)
            return ""
        return result.stdout.strip() if result.returncode == 0 else ""

    def is_riscv(self) -> bool:
        """True if this host is a RISC-V machine"""
        if 'riscv' in self.platform_arch or 'riscv' in self._uname_machine():
            return True

        cpuinfo = self.read_cpuinfo()
        return 'riscv' in cpuinfo or 'RISC-V' in cpuinfo

    # ========================================================================
    # /proc/cpuinfo
    # ========================================================================

    def read_cpuinfo(self) -> str:
        return _read_text(self.config.cpuinfo_path) or ""

    def get_isa_string(self) -> str:
        """Raw ISA string of the first hart, "unknown" if unavailable"""
        for line in self.read_cpuinfo().splitlines():
            if line.startswith('isa'):
                isa = _cpuinfo_value(line)
                if isa:
                    return isa
        return UNKNOWN_ISA

    def get_hart_count_num(self) -> int:
        """Number of harts: processor entries in cpuinfo, else psutil's logical CPU count"""
        count = sum(
            1 for line in self.read_cpuinfo().splitlines()
            if line.startswith('processor')
        )
        if count > 0:
            return count
        return psutil.cpu_count(logical=True) or 0

    def get_hart_count(self) -> str:
        """Hart count formatted for display, e.g. "4 harts" """
        count = self.get_hart_count_num()
        return f"{count} hart{'s' if count > 1 else ''}"

    def get_hardware_ids(self) -> HardwareIds:
        """
        Machine ID CSRs of the first hart that reports them.

        Empty values and "0x0" (not implemented) are dropped.
        """
        ids = HardwareIds()

        for line in self.read_cpuinfo().splitlines():
            key = line.split(':', 1)[0].strip()
            if key not in ('mvendorid', 'marchid', 'mimpid'):
                continue
            value = _cpuinfo_value(line)
            if value and value != '0x0' and not getattr(ids, key):
                setattr(ids, key, value)

        return ids

    # ========================================================================
    # sysfs
    # ========================================================================

    def get_cache(self) -> CacheInfo:
        """Cache sizes of hart 0"""
        sizes: Dict[str, str] = {}
        cache_dir = self.config.cpu0_path / "cache"

        for index, attr in CACHE_INDEXES.items():
            content = _read_text(cache_dir / index / "size")
            if content and content.strip():
                sizes[attr] = content.strip()

        return CacheInfo(**sizes)

    def get_cache_info(self) -> str:
        """Cache sizes formatted for display ("L1D:32K L1I:32K L2:1024K")"""
        return self.get_cache().summary()

    def get_sysfs_vlen(self) -> Optional[int]:
        """Actual VLEN in bits as exported by the kernel, if available"""
        content = _read_text(self.config.cpu0_path / "riscv" / "vlen")
        if content is None:
            return None
        try:
            return int(content.strip(), 0)
        except ValueError:
            logger.debug("Unexpected vlen value: %r", content)
            return None

    def get_vector_detail(self, isa: Optional[str] = None) -> str:
        """
        Vector summary for display, "" without vector support.

        The sysfs VLEN, when present, is appended as ", VLEN=<n>".
        """
        isa = self.get_isa_string() if isa is None else isa
        detail = parse_vector_detail(isa)
        if detail is None:
            return ""

        vlen = self.get_sysfs_vlen()
        if vlen is not None:
            detail += f", VLEN={vlen}"
        return detail

    def get_vector_info(self, isa: Optional[str] = None) -> VectorInfo:
        isa = self.get_isa_string() if isa is None else isa
        if not has_vector(isa):
            return VectorInfo()

        sysfs_vlen = self.get_sysfs_vlen()
        return VectorInfo(
            enabled=True,
            vlen=sysfs_vlen if sysfs_vlen is not None else parse_vlen(isa),
            elen=parse_elen(isa),
            detail=self.get_vector_detail(isa),
        )

    # ========================================================================
    # Device tree
    # ========================================================================

    def _read_device_tree_model(self) -> Optional[str]:
        content = _read_text(self.config.device_tree_path / "model")
        if content is None:
            return None
        model = content.strip('\x00').strip()
        return model or None

    def _read_compatible_strings(self) -> List[str]:
        content = _read_text(self.config.device_tree_path / "compatible")
        if not content:
            return []
        return [s for s in content.split('\x00') if s]

    def get_board_info(self) -> str:
        """Board model from the device tree, else its first compatible string"""
        model = self._read_device_tree_model()
        if model:
            return model

        compatible = self._read_compatible_strings()
        return compatible[0] if compatible else ""

    # ========================================================================
    # Full collection
    # ========================================================================

    def collect_riscv_info(self, isa: Optional[str] = None) -> RiscvInfo:
        """
        Collect RISC-V specific information only.

        Args:
            isa: ISA string to report instead of the host's one
        """
        isa = self.get_isa_string() if isa is None else isa
        return RiscvInfo(isa=isa, **self._riscv_fields(isa))

    def collect_all_info(self, isa: Optional[str] = None) -> SystemInfo:
        """Collect RISC-V information plus board and host metrics"""
        isa = self.get_isa_string() if isa is None else isa
        used, total = system.get_memory_bytes()

        return SystemInfo(
            isa=isa,
            board=self.get_board_info(),
            memory_used_bytes=used,
            memory_total_bytes=total,
            kernel=system.get_kernel_info(),
            os=system.get_os_info(self.config.os_release),
            uptime_seconds=system.get_uptime_seconds(),
            **self._riscv_fields(isa),
        )

    def _riscv_fields(self, isa: str) -> Dict:
        return {
            'extensions': extension_names(parse_base_extensions_explained(isa)),
            'z_extensions': extension_names(parse_named_extensions_with_category(isa, Namespace.Z)),
            's_extensions': extension_names(parse_named_extensions_with_category(isa, Namespace.S)),
            'vector': self.get_vector_info(isa),
            'hart_count': self.get_hart_count_num(),
            'hardware_ids': self.get_hardware_ids(),
            'cache': self.get_cache(),
        }
