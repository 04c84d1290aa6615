"""
Structured output for riscfetch reports (JSON and YAML).
"""

import json
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from ..core.projection import all_known_with_status, all_standard_with_status
from ..core.structures import Namespace, RiscvInfo


YAML_SUFFIXES = ('.yaml', '.yml')


def build_document(info: RiscvInfo, include_all: bool = False) -> Dict[str, Any]:
    """
    Nested key-value document for a report.

    Args:
        info: RiscvInfo or SystemInfo record
        include_all: Add every catalog entry with its supported flag

    Returns:
        Plain dict ready for json/yaml serialization
    """
    document = info.to_dict()

    if include_all:
        document['all_extensions'] = {
            'standard': [e.to_dict() for e in all_standard_with_status(info.isa)],
            'z': [e.to_dict() for e in all_known_with_status(Namespace.Z, info.isa)],
            's': [e.to_dict() for e in all_known_with_status(Namespace.S, info.isa)],
        }

    return document


def not_riscv_document() -> Dict[str, str]:
    return {'error': 'not_riscv', 'message': 'This system is not RISC-V'}


def to_json(document: Dict[str, Any]) -> str:
    return json.dumps(document, indent=2)


def to_yaml(document: Dict[str, Any]) -> str:
    return yaml.safe_dump(document, default_flow_style=False, sort_keys=False)


def save_document(document: Dict[str, Any], path: Union[str, Path]) -> Path:
    """Write a document to disk; .yaml/.yml files get YAML, anything else JSON"""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w') as f:
        if path.suffix.lower() in YAML_SUFFIXES:
            yaml.safe_dump(document, f, default_flow_style=False, sort_keys=False)
        else:
            json.dump(document, f, indent=2)
            f.write("\n")

    return path
