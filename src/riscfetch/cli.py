#!/usr/bin/env python3
"""
riscfetch

Display RISC-V architecture information: ISA extensions, vector unit,
hart count, machine IDs, caches, board and host details.

Usage:
    riscfetch
    riscfetch --explain
    riscfetch --all
    riscfetch --json --riscv-only
    riscfetch --isa rv64gcv_zba_zbb_zvl256b_sstc --no-color
    riscfetch --export detection.yaml
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import ConfigError, VALID_STYLES, load_config
from .core.projection import detected_view
from .hardware.detector import RiscvDetector
from .hardware.system import get_user_host
from .hardware.vendors import get_default_vendor, get_vendor_info, vendor_aliases
from .logging import LogConfig, configure_logging
from .reporting.serializer import build_document, not_riscv_document, save_document, to_json, to_yaml
from .reporting.terminal import TerminalRenderer, resolve_capability


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="riscfetch",
        description="RISC-V architecture information display tool"
    )
    parser.add_argument(
        "-l", "--logo",
        help=f"Vendor banner ({', '.join(vendor_aliases())})"
    )
    parser.add_argument(
        "--style",
        choices=VALID_STYLES,
        help="Banner style"
    )
    parser.add_argument(
        "-e", "--explain",
        action="store_true",
        help="Show a description for each ISA extension"
    )
    parser.add_argument(
        "-a", "--all",
        action="store_true",
        help="Show all known extensions with marks for supported ones"
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "-j", "--json",
        action="store_true",
        help="Output in JSON format (machine-readable)"
    )
    output.add_argument(
        "--yaml",
        action="store_true",
        help="Output in YAML format"
    )
    parser.add_argument(
        "-r", "--riscv-only",
        action="store_true",
        help="Show only RISC-V specific info (no OS, memory, uptime)"
    )
    parser.add_argument(
        "--isa",
        help="Report on this ISA string instead of the host's"
    )
    parser.add_argument(
        "--export",
        type=Path,
        help="Also write the structured report to a file (.json, .yaml)"
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to a YAML config file"
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colors"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log detection details to stderr"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    configure_logging(LogConfig(level=logging.DEBUG if args.verbose else logging.WARNING))

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"riscfetch: {e}", file=sys.stderr)
        return 2

    logo = args.logo or config.logo
    style = args.style or config.style
    color = False if args.no_color else config.color

    vendor = get_vendor_info(logo)
    if vendor is None:
        logger.warning("Unknown vendor %r, using default banner", logo)
        vendor = get_default_vendor()

    detector = RiscvDetector(config)
    capability = resolve_capability(color)
    renderer = TerminalRenderer(capability)

    if args.isa is None and not detector.is_riscv():
        if args.json:
            print(to_json(not_riscv_document()))
        elif args.yaml:
            print(to_yaml(not_riscv_document()), end="")
        else:
            print("\n".join(renderer.render_not_riscv()))
        return 1

    if args.riscv_only:
        info = detector.collect_riscv_info(args.isa)
    else:
        info = detector.collect_all_info(args.isa)
    logger.debug("ISA string: %s", info.isa)

    document = None
    if args.json or args.yaml or args.export:
        document = build_document(info, include_all=args.all)

    if args.json:
        print(to_json(document))
    elif args.yaml:
        print(to_yaml(document), end="")
    elif args.all:
        lines = [""] + renderer.render_banner(vendor, style) + [""]
        lines.append(f"ISA: {info.isa}")
        lines.append("")
        lines.extend(renderer.render_all_extensions(info.isa))
        lines.append("")
        print("\n".join(lines))
    else:
        view = detected_view(info.isa)
        user_host = None if args.riscv_only else get_user_host()
        lines = renderer.render_report(
            view, info, vendor,
            style=style,
            explain=args.explain,
            user_host=user_host,
        )
        print("\n".join(lines))

    if args.export:
        path = save_document(document, args.export)
        print(f"✓ Report exported to: {path}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
