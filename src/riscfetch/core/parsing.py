"""
ISA String Parsing

Turns a raw capability string as exposed by the kernel
(e.g. "rv64imafdcv_zicsr_zifencei_zba_zbb_zvl256b") into base extensions,
named Z/S extensions and vector details.

All functions are total: empty, unknown or malformed input produces an
empty result (or None for the vector detail), never an exception.
"""

from typing import List, Optional

from .catalog import STANDARD_EXTENSIONS, lookup_base, match_named
from .structures import BaseExtension, ClassifiedExtension, Namespace


# Base letters expanded by the G shorthand (I is handled separately)
G_IMPLIED_BASE = ('m', 'a', 'f', 'd')

# Named extensions implied by G, in display order
G_IMPLIED_NAMED = ('zicsr', 'zifencei')

# zvl<N>b markers, largest first
VLEN_MARKERS = (65536, 32768, 16384, 8192, 4096, 2048, 1024, 512, 256, 128, 64, 32)

# zve<N>* element widths, largest first
ELEN_WIDTHS = (64, 32)


def strip_rv_prefix(base: str) -> str:
    """Strip a leading rv32/rv64 marker to get the extension letters only"""
    for prefix in ('rv64', 'rv32'):
        if base.startswith(prefix):
            return base[len(prefix):]
    return base


def base_segment(isa: str) -> str:
    """Lowercased part of the ISA string before the first underscore"""
    return isa.lower().split('_', 1)[0]


def extension_letters(isa: str) -> str:
    """Single-letter extension run of an ISA string (prefix removed)"""
    return strip_rv_prefix(base_segment(isa))


def has_g_shorthand(isa: str) -> bool:
    return 'g' in extension_letters(isa)


def _select_base_extensions(isa: str) -> List[BaseExtension]:
    letters = extension_letters(isa)
    has_g = 'g' in letters

    selected = [
        ext for ext in STANDARD_EXTENSIONS
        if ext.code in letters or (has_g and ext.code in G_IMPLIED_BASE)
    ]

    # G implies I unless the embedded base was requested
    if has_g and not any(ext.code in ('i', 'e') for ext in selected):
        selected.insert(0, lookup_base('i'))

    return selected


def parse_base_extensions(isa: str) -> str:
    """
    Parse base extensions into a compact string (e.g. "I M A F D C").

    Letters come out in canonical table order regardless of input order.
    "g" expands to I M A F D. Named tokens after the first underscore are
    never considered.

    Examples:
        >>> parse_base_extensions("rv64gc")
        'I M A F D C'
        >>> parse_base_extensions("rv32ec")
        'E C'
    """
    return " ".join(ext.name for ext in _select_base_extensions(isa))


def parse_base_extensions_explained(isa: str) -> List[BaseExtension]:
    """Base extensions as catalog entries, same selection as parse_base_extensions"""
    return _select_base_extensions(isa)


def _scan_named_tokens(isa: str, prefixes: str, seed_g: bool) -> List[str]:
    isa = isa.lower()
    tokens: List[str] = []

    if seed_g and has_g_shorthand(isa):
        tokens.extend(G_IMPLIED_NAMED)

    for part in isa.split('_'):
        if part and part[0] in prefixes and part not in tokens:
            tokens.append(part)

    return tokens


def parse_named_extensions(isa: str) -> str:
    """
    All Z and S tokens of an ISA string, space-joined.

    G-implied zicsr/zifencei come first, then tokens in the order they
    appear. Unknown tokens are kept as-is.
    """
    return " ".join(_scan_named_tokens(isa, 'zs', seed_g=True))


def parse_z_extensions(isa: str) -> str:
    """Z tokens only (G-implied ones first)"""
    return " ".join(_scan_named_tokens(isa, 'z', seed_g=True))


def parse_s_extensions(isa: str) -> str:
    """S tokens only"""
    return " ".join(_scan_named_tokens(isa, 's', seed_g=False))


def parse_named_extensions_with_category(isa: str, namespace: Namespace) -> List[ClassifiedExtension]:
    """
    Named extensions of one namespace with category and description attached.

    Each token is resolved through the catalog by substring containment
    (see catalog.match_named), so one token can yield several entries,
    e.g. "zknh" gives Zk, Zkn and Zknh. Tokens without a catalog entry
    are left out. Each canonical extension appears at most once.

    Args:
        isa: Raw ISA string
        namespace: Namespace.Z or Namespace.S

    Returns:
        ClassifiedExtension list, implied entries first, then scan order
        (table order within a token)
    """
    prefix = namespace.value
    tokens = _scan_named_tokens(isa, prefix, seed_g=(namespace is Namespace.Z))

    result: List[ClassifiedExtension] = []
    seen = set()
    for token in tokens:
        for ext in match_named(token, namespace):
            if ext.name in seen:
                continue
            seen.add(ext.name)
            result.append(ClassifiedExtension(
                name=ext.name,
                description=ext.description,
                category=ext.category,
            ))

    return result


def has_vector(isa: str) -> bool:
    """True if the base letters contain V or any Zve* subset is listed"""
    return 'v' in extension_letters(isa) or 'zve' in isa.lower()


def parse_vlen(isa: str) -> Optional[int]:
    """
    Guaranteed minimum VLEN from the largest zvl<N>b marker.

    Returns None when there is no vector support or no marker; VLEN is
    implementation-defined in that case.
    """
    if not has_vector(isa):
        return None

    isa = isa.lower()
    for width in VLEN_MARKERS:
        if f"zvl{width}b" in isa:
            return width
    return None


def parse_elen(isa: str) -> Optional[int]:
    """
    Maximum vector element width in bits.

    Full V requires ELEN=64. Otherwise the widest Zve subset decides
    (zve64* -> 64, zve32* -> 32). None without vector support.
    """
    if not has_vector(isa):
        return None
    if 'v' in extension_letters(isa):
        return 64

    isa = isa.lower()
    for width in ELEN_WIDTHS:
        if f"zve{width}" in isa:
            return width
    return None


def parse_vector_detail(isa: str) -> Optional[str]:
    """
    Vector summary such as "Enabled" or "Enabled, VLEN>=256".

    Returns None when the ISA string has no vector support.
    """
    if not has_vector(isa):
        return None

    details = ["Enabled"]
    vlen = parse_vlen(isa)
    if vlen is not None:
        details.append(f"VLEN>={vlen}")

    return ", ".join(details)
