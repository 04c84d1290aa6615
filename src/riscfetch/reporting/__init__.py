"""
Report rendering: decorated terminal text and structured documents.
"""

from .terminal import (
    TerminalCapability,
    ANSIColor,
    TerminalRenderer,
    detect_terminal_capability,
    resolve_capability,
    colorize,
)
from .serializer import (
    build_document,
    not_riscv_document,
    to_json,
    to_yaml,
    save_document,
)

__all__ = [
    'TerminalCapability',
    'ANSIColor',
    'TerminalRenderer',
    'detect_terminal_capability',
    'resolve_capability',
    'colorize',
    'build_document',
    'not_riscv_document',
    'to_json',
    'to_yaml',
    'save_document',
]
