"""
Hardware and Host Detection

Readers for the RISC-V pseudo-files and generic host metrics.
"""

from .detector import RiscvDetector, UNKNOWN_ISA
from .system import (
    get_memory_bytes,
    get_memory_info,
    get_uptime_seconds,
    get_uptime,
    format_uptime,
    get_kernel_info,
    get_os_info,
    get_user_host,
)
from .vendors import Vendor, VENDORS, get_vendor_info, get_default_vendor, vendor_aliases

__all__ = [
    # Detection
    'RiscvDetector',
    'UNKNOWN_ISA',
    # Host metrics
    'get_memory_bytes',
    'get_memory_info',
    'get_uptime_seconds',
    'get_uptime',
    'format_uptime',
    'get_kernel_info',
    'get_os_info',
    'get_user_host',
    # Vendors
    'Vendor',
    'VENDORS',
    'get_vendor_info',
    'get_default_vendor',
    'vendor_aliases',
]
