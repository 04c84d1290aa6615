"""
riscfetch: RISC-V architecture information

Parses RISC-V ISA capability strings into base extensions, categorized
Z/S extensions and vector details, and reports them together with
hardware and host information.

Example:
    from riscfetch import RiscvDetector, parse_base_extensions

    detector = RiscvDetector()
    if detector.is_riscv():
        isa = detector.get_isa_string()
        print(parse_base_extensions(isa))
"""

__version__ = "0.3.0"

from .core import (
    Namespace,
    ClassifiedExtension,
    RiscvInfo,
    SystemInfo,
    parse_base_extensions,
    parse_named_extensions,
    parse_z_extensions,
    parse_s_extensions,
    parse_named_extensions_with_category,
    parse_vector_detail,
    group_by_category,
    all_known_with_status,
    detected_view,
)
from .hardware import RiscvDetector
from .config import FetchConfig, ConfigError, load_config

__all__ = [
    '__version__',
    'Namespace',
    'ClassifiedExtension',
    'RiscvInfo',
    'SystemInfo',
    'parse_base_extensions',
    'parse_named_extensions',
    'parse_z_extensions',
    'parse_s_extensions',
    'parse_named_extensions_with_category',
    'parse_vector_detail',
    'group_by_category',
    'all_known_with_status',
    'detected_view',
    'RiscvDetector',
    'FetchConfig',
    'ConfigError',
    'load_config',
]
