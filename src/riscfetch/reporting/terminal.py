"""
Terminal rendering for riscfetch reports.

Provides:
- Terminal capability detection with ASCII fallback
- ANSI color helpers
- Report rendering in compact, explained and all-extensions modes

Renderers return lists of lines; the CLI prints them. Nothing in this
module reads the host.
"""

import os
import sys
from enum import Enum
from typing import Dict, List, Optional, Sequence

from ..core.catalog import category_label
from ..core.projection import (
    DetectedView,
    all_known_with_status,
    all_standard_with_status,
    extension_names,
    group_by_category,
)
from ..core.parsing import parse_base_extensions_explained
from ..core.structures import ClassifiedExtension, Namespace, RiscvInfo, SystemInfo
from ..hardware.system import GIB, format_uptime
from ..hardware.vendors import Vendor


class TerminalCapability(Enum):
    """Terminal display capabilities"""
    BASIC = "basic"  # ASCII only
    UTF8 = "utf8"    # UTF-8 symbols
    COLOR = "color"  # ANSI colors


class ANSIColor:
    """ANSI color codes for terminal output"""

    RESET = "\033[0m"

    WHITE = "\033[37m"

    BRIGHT_BLACK = "\033[90m"
    BRIGHT_RED = "\033[91m"
    BRIGHT_GREEN = "\033[92m"
    BRIGHT_YELLOW = "\033[93m"
    BRIGHT_BLUE = "\033[94m"
    BRIGHT_MAGENTA = "\033[95m"
    BRIGHT_CYAN = "\033[96m"

    BOLD = "\033[1m"


# Marks used by the all-extensions view
MARKS = {
    TerminalCapability.BASIC: ("[x]", "[ ]"),
    TerminalCapability.UTF8: ("✓", "✗"),
    TerminalCapability.COLOR: ("✓", "✗"),
}

SEPARATOR_WIDTH = 32


def detect_terminal_capability(stream=None) -> TerminalCapability:
    """
    Detect terminal capabilities for optimal rendering.

    Returns:
        TerminalCapability indicating what the terminal supports
    """
    stream = stream or sys.stdout

    # Check if output is being redirected
    if not stream.isatty():
        return TerminalCapability.BASIC

    encoding = (getattr(stream, 'encoding', None) or '').lower()
    utf8 = 'utf' in encoding

    # NO_COLOR disables color but keeps symbols
    if os.environ.get('NO_COLOR'):
        return TerminalCapability.UTF8 if utf8 else TerminalCapability.BASIC

    term = os.environ.get('TERM', '').lower()
    if term and term != 'dumb':
        return TerminalCapability.COLOR

    return TerminalCapability.UTF8 if utf8 else TerminalCapability.BASIC


def resolve_capability(color: Optional[bool], stream=None) -> TerminalCapability:
    """Apply an explicit color setting on top of the detected capability"""
    detected = detect_terminal_capability(stream)
    if color is None:
        return detected
    if color:
        return TerminalCapability.COLOR
    if detected is TerminalCapability.COLOR:
        return TerminalCapability.UTF8
    return detected


def colorize(text: str, color: str, capability: TerminalCapability, bold: bool = False) -> str:
    """
    Colorize text if terminal supports it.

    Args:
        text: Text to colorize
        color: ANSI color code
        capability: Terminal capability
        bold: Also apply bold

    Returns:
        Colorized text or plain text if not supported
    """
    if capability is not TerminalCapability.COLOR:
        return text

    style = ANSIColor.BOLD if bold else ""
    return f"{style}{color}{text}{ANSIColor.RESET}"


class TerminalRenderer:
    """Render riscfetch reports as decorated terminal lines"""

    def __init__(self, capability: TerminalCapability = TerminalCapability.BASIC):
        self.capability = capability

    def _label(self, text: str, color: str) -> str:
        return colorize(text, color, self.capability, bold=True)

    def _value(self, text: str) -> str:
        return colorize(text, ANSIColor.WHITE, self.capability)

    def _field(self, label: str, value: str, color: str = ANSIColor.BRIGHT_CYAN) -> str:
        return f"{self._label(label, color)} {self._value(value)}"

    # ------------------------------------------------------------------
    # Banner
    # ------------------------------------------------------------------

    def render_banner(self, vendor: Vendor, style: str = "normal") -> List[str]:
        """Vendor banner: framed title (normal), one line (small) or nothing"""
        if style == "none":
            return []
        if style == "small":
            return [self._label(f"{vendor.display_name} - {vendor.subtitle}", ANSIColor.BRIGHT_CYAN)]

        rule_char = "=" if self.capability is TerminalCapability.BASIC else "━"
        title = vendor.display_name
        width = max(len(title), len(vendor.subtitle)) + 8
        return [
            colorize(rule_char * width, ANSIColor.BRIGHT_CYAN, self.capability),
            self._label(title.center(width), ANSIColor.BRIGHT_CYAN),
            colorize(vendor.subtitle.center(width), ANSIColor.BRIGHT_CYAN, self.capability),
            colorize(rule_char * width, ANSIColor.BRIGHT_CYAN, self.capability),
        ]

    # ------------------------------------------------------------------
    # Extensions
    # ------------------------------------------------------------------

    def render_extensions_compact(self, view: DetectedView) -> List[str]:
        """Base letters on one line, then one line per Z/S category"""
        lines = []
        if view.base:
            lines.append(self._field("Ext:", view.base, ANSIColor.BRIGHT_YELLOW))

        lines.extend(self._compact_groups(view.z_groups, Namespace.Z, ANSIColor.BRIGHT_YELLOW))
        lines.extend(self._compact_groups(view.s_groups, Namespace.S, ANSIColor.BRIGHT_MAGENTA))
        return lines

    def _compact_groups(
        self,
        groups: Dict[str, List[ClassifiedExtension]],
        namespace: Namespace,
        color: str,
    ) -> List[str]:
        prefix = namespace.value.upper()
        lines = []
        for category, exts in groups.items():
            label = f"{prefix}-{category_label(category, namespace)}:"
            lines.append(self._field(label, " ".join(extension_names(exts)), color))
        return lines

    def render_extensions_explained(self, view: DetectedView) -> List[str]:
        """Every detected extension with its description, grouped by category"""
        lines = [self._label("Extensions:", ANSIColor.BRIGHT_YELLOW)]
        for ext in parse_base_extensions_explained(view.isa):
            lines.append(self._explained_row(ext.name, ext.description))

        lines.extend(self._explained_groups(view.z_groups, Namespace.Z, ANSIColor.BRIGHT_YELLOW))
        lines.extend(self._explained_groups(view.s_groups, Namespace.S, ANSIColor.BRIGHT_MAGENTA))
        return lines

    def _explained_row(self, name: str, description: str) -> str:
        padded = f"{name:<10}"
        return f"  {colorize(padded, ANSIColor.BRIGHT_GREEN, self.capability)} {description}"

    def _explained_groups(
        self,
        groups: Dict[str, List[ClassifiedExtension]],
        namespace: Namespace,
        color: str,
    ) -> List[str]:
        prefix = namespace.value.upper()
        lines = []
        for category, exts in groups.items():
            lines.append("")
            lines.append(self._label(
                f"{prefix}-Extensions ({category_label(category, namespace)}):", color
            ))
            for ext in exts:
                lines.append(self._explained_row(ext.name, ext.description))
        return lines

    def render_all_extensions(self, isa: str) -> List[str]:
        """Full catalog with a supported/unsupported mark per entry"""
        lines = [self._label("Standard Extensions:", ANSIColor.BRIGHT_YELLOW)]
        lines.extend(self._status_rows(all_standard_with_status(isa)))

        for namespace, title, color in (
            (Namespace.Z, "Z-Extensions", ANSIColor.BRIGHT_YELLOW),
            (Namespace.S, "S-Extensions", ANSIColor.BRIGHT_MAGENTA),
        ):
            entries = all_known_with_status(namespace, isa)
            supported = sum(1 for e in entries if e.supported)
            for category, exts in group_by_category(entries).items():
                lines.append("")
                lines.append(self._label(
                    f"{title} ({category_label(category, namespace)}):", color
                ))
                lines.extend(self._status_rows(exts))
            lines.append("")
            lines.append(f"{title}: {supported}/{len(entries)} supported")

        return lines

    def _status_rows(self, entries: Sequence[ClassifiedExtension]) -> List[str]:
        yes, no = MARKS[self.capability]
        rows = []
        for ext in entries:
            if ext.supported:
                mark = colorize(yes, ANSIColor.BRIGHT_GREEN, self.capability)
            else:
                mark = colorize(no, ANSIColor.BRIGHT_BLACK, self.capability)
            rows.append(f"  {mark} {ext.name:<14} {ext.description}")
        return rows

    # ------------------------------------------------------------------
    # Full report
    # ------------------------------------------------------------------

    def render_riscv_section(self, view: DetectedView, info: RiscvInfo, explain: bool = False) -> List[str]:
        lines = [self._field("ISA:", info.isa)]

        if explain:
            lines.extend(self.render_extensions_explained(view))
        else:
            lines.extend(self.render_extensions_compact(view))

        if info.vector.detail:
            lines.append(self._field("Vector:", info.vector.detail, ANSIColor.BRIGHT_MAGENTA))

        count = info.hart_count
        lines.append(self._field("Harts:", f"{count} hart{'s' if count > 1 else ''}"))

        ids = info.hardware_ids
        if not ids.is_empty():
            parts = []
            if ids.mvendorid:
                parts.append(f"vendor:{ids.mvendorid}")
            if ids.marchid:
                parts.append(f"arch:{ids.marchid}")
            if ids.mimpid:
                parts.append(f"impl:{ids.mimpid}")
            lines.append(self._field("HW IDs:", " ".join(parts), ANSIColor.BRIGHT_GREEN))

        if not info.cache.is_empty():
            lines.append(self._field("Cache:", info.cache.summary()))

        return lines

    def render_system_section(self, info: SystemInfo, user_host: Optional[str] = None) -> List[str]:
        blue = ANSIColor.BRIGHT_BLUE
        lines = []
        if info.board:
            lines.append(self._field("Board:", info.board, blue))
        lines.append(self._field("OS:", info.os, blue))
        lines.append(self._field("Kernel:", info.kernel, blue))
        memory = f"{info.memory_used_bytes / GIB:.2f} GiB / {info.memory_total_bytes / GIB:.2f} GiB"
        lines.append(self._field("Memory:", memory, blue))
        lines.append(self._field("Uptime:", format_uptime(info.uptime_seconds), blue))
        if user_host:
            lines.append(self._field("User:", user_host, blue))
        return lines

    def render_report(
        self,
        view: DetectedView,
        info: RiscvInfo,
        vendor: Vendor,
        style: str = "normal",
        explain: bool = False,
        user_host: Optional[str] = None,
    ) -> List[str]:
        """
        Complete report.

        The host section is included only when `info` is a SystemInfo
        (i.e. not in --riscv-only mode).
        """
        lines = [""]
        banner = self.render_banner(vendor, style)
        if banner:
            lines.extend(banner)
            lines.append("")

        lines.extend(self.render_riscv_section(view, info, explain=explain))

        if isinstance(info, SystemInfo):
            lines.append("")
            lines.append(colorize("-" * SEPARATOR_WIDTH, ANSIColor.BRIGHT_BLACK, self.capability))
            lines.append("")
            lines.extend(self.render_system_section(info, user_host))

        lines.append("")
        return lines

    def render_not_riscv(self) -> List[str]:
        return ["", colorize("Sorry, not RISC-V", ANSIColor.BRIGHT_RED, self.capability, bold=True), ""]
