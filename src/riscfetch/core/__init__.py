"""
ISA Classification Core

Catalog, parser and projections for RISC-V ISA capability strings. Every
function here is a pure function of its input string and the static
catalog.
"""

from .structures import (
    Namespace,
    BaseExtension,
    NamedExtension,
    ClassifiedExtension,
    HardwareIds,
    VectorInfo,
    CacheInfo,
    RiscvInfo,
    SystemInfo,
)

from .catalog import (
    STANDARD_EXTENSIONS,
    Z_EXTENSIONS,
    S_EXTENSIONS,
    Z_CATEGORY_NAMES,
    S_CATEGORY_NAMES,
    lookup_base,
    match_named,
    lookup_named,
    category_label,
    named_extensions,
    category_names,
)

from .parsing import (
    strip_rv_prefix,
    parse_base_extensions,
    parse_base_extensions_explained,
    parse_named_extensions,
    parse_z_extensions,
    parse_s_extensions,
    parse_named_extensions_with_category,
    parse_vector_detail,
    parse_vlen,
    parse_elen,
    has_vector,
)

from .projection import (
    DetectedView,
    detected_view,
    group_by_category,
    all_known_with_status,
    all_standard_with_status,
    extension_names,
)

__all__ = [
    # Types
    'Namespace',
    'BaseExtension',
    'NamedExtension',
    'ClassifiedExtension',
    'HardwareIds',
    'VectorInfo',
    'CacheInfo',
    'RiscvInfo',
    'SystemInfo',
    # Catalog
    'STANDARD_EXTENSIONS',
    'Z_EXTENSIONS',
    'S_EXTENSIONS',
    'Z_CATEGORY_NAMES',
    'S_CATEGORY_NAMES',
    'lookup_base',
    'match_named',
    'lookup_named',
    'category_label',
    'named_extensions',
    'category_names',
    # Parsing
    'strip_rv_prefix',
    'parse_base_extensions',
    'parse_base_extensions_explained',
    'parse_named_extensions',
    'parse_z_extensions',
    'parse_s_extensions',
    'parse_named_extensions_with_category',
    'parse_vector_detail',
    'parse_vlen',
    'parse_elen',
    'has_vector',
    # Projection
    'DetectedView',
    'detected_view',
    'group_by_category',
    'all_known_with_status',
    'all_standard_with_status',
    'extension_names',
]
