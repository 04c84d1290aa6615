"""
Presentation Projection

Builds the two audience-facing views of a parsed ISA string:
- detected-only: what the host actually reports, grouped by category
- all-known: every catalog entry with a supported flag

Usage:
    from riscfetch.core.projection import detected_view, all_known_with_status

    view = detected_view("rv64gcv_zba_zbb_zvl256b_sstc")
    for category, exts in view.z_groups.items():
        print(category, [e.name for e in exts])

    for ext in all_known_with_status(Namespace.S, isa):
        print("✓" if ext.supported else "✗", ext.name)
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence

from .catalog import STANDARD_EXTENSIONS, named_extensions
from .parsing import (
    parse_base_extensions,
    parse_base_extensions_explained,
    parse_named_extensions_with_category,
    parse_vector_detail,
)
from .structures import ClassifiedExtension, Namespace


def group_by_category(items: Iterable[ClassifiedExtension]) -> Dict[str, List[ClassifiedExtension]]:
    """
    Partition classified extensions by category id.

    Members keep their first-seen order within a group; groups are
    returned in ascending category-id order.
    """
    groups: Dict[str, List[ClassifiedExtension]] = {}
    for item in items:
        groups.setdefault(item.category, []).append(item)

    return {category: groups[category] for category in sorted(groups)}


def all_known_with_status(namespace: Namespace, isa: str) -> List[ClassifiedExtension]:
    """
    Every catalog entry of a namespace, flagged with detection status.

    Order is catalog declaration order. `supported` is True exactly for
    the entries parse_named_extensions_with_category() returns for `isa`.
    """
    detected = {ext.name for ext in parse_named_extensions_with_category(isa, namespace)}

    return [
        ClassifiedExtension(
            name=ext.name,
            description=ext.description,
            category=ext.category,
            supported=ext.name in detected,
        )
        for ext in named_extensions(namespace)
    ]


def all_standard_with_status(isa: str) -> List[ClassifiedExtension]:
    """Every base extension, flagged the same way parse_base_extensions selects them"""
    detected = {ext.name for ext in parse_base_extensions_explained(isa)}

    return [
        ClassifiedExtension(
            name=ext.name,
            description=ext.description,
            category='base',
            supported=ext.name in detected,
        )
        for ext in STANDARD_EXTENSIONS
    ]


@dataclass
class DetectedView:
    """Detected-only projection consumed by the renderers"""
    isa: str
    base: str
    z_extensions: List[ClassifiedExtension] = field(default_factory=list)
    s_extensions: List[ClassifiedExtension] = field(default_factory=list)
    vector: Optional[str] = None

    @property
    def z_groups(self) -> Dict[str, List[ClassifiedExtension]]:
        return group_by_category(self.z_extensions)

    @property
    def s_groups(self) -> Dict[str, List[ClassifiedExtension]]:
        return group_by_category(self.s_extensions)


def detected_view(isa: str) -> DetectedView:
    """Parse an ISA string into the detected-only view"""
    return DetectedView(
        isa=isa,
        base=parse_base_extensions(isa),
        z_extensions=parse_named_extensions_with_category(isa, Namespace.Z),
        s_extensions=parse_named_extensions_with_category(isa, Namespace.S),
        vector=parse_vector_detail(isa),
    )


def extension_names(items: Sequence) -> List[str]:
    """Display names of catalog or classified entries, order preserved"""
    return [item.name for item in items]
