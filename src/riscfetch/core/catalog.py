"""
RISC-V Extension Catalog

Static reference data for every extension riscfetch knows how to name:
- STANDARD_EXTENSIONS: single-letter base extensions in canonical order
- Z_EXTENSIONS: unprivileged multi-letter extensions
- S_EXTENSIONS: privileged/supervisor multi-letter extensions
- Z_CATEGORY_NAMES / S_CATEGORY_NAMES: category id -> display label

Based on the RISC-V ISA specification (2025-11-26) and LLVM 22.0 support.
Table order is significant: it is the display order of the "all known"
views and the order of lookup matches.
"""

from typing import Dict, List, Optional, Tuple

from .structures import BaseExtension, NamedExtension, Namespace


DEFAULT_CATEGORY_LABEL = "Other"


STANDARD_EXTENSIONS: Tuple[BaseExtension, ...] = (
    BaseExtension('i', "I", "Base Integer Instructions"),
    BaseExtension('e', "E", "Embedded (16 registers)"),
    BaseExtension('m', "M", "Integer Multiply/Divide"),
    BaseExtension('a', "A", "Atomic Instructions"),
    BaseExtension('f', "F", "Single-Precision Float"),
    BaseExtension('d', "D", "Double-Precision Float"),
    BaseExtension('q', "Q", "Quad-Precision Float"),
    BaseExtension('c', "C", "Compressed (16-bit)"),
    BaseExtension('b', "B", "Bit Manipulation"),
    BaseExtension('v', "V", "Vector (SIMD)"),
    BaseExtension('h', "H", "Hypervisor"),
)


Z_EXTENSIONS: Tuple[NamedExtension, ...] = (
    # Base/CSR
    NamedExtension("zicsr", "Zicsr", "CSR Instructions", "base"),
    NamedExtension("zifencei", "Zifencei", "Instruction-Fetch Fence", "base"),
    NamedExtension("zicntr", "Zicntr", "Base Counters/Timers", "base"),
    NamedExtension("zihpm", "Zihpm", "Hardware Perf Counters", "base"),
    # Hints
    NamedExtension("zihintpause", "Zihintpause", "Pause Hint", "hint"),
    NamedExtension("zihintntl", "Zihintntl", "Non-Temporal Hints", "hint"),
    # Cache
    NamedExtension("zicbom", "Zicbom", "Cache-Block Management", "cache"),
    NamedExtension("zicboz", "Zicboz", "Cache-Block Zero", "cache"),
    NamedExtension("zicbop", "Zicbop", "Cache-Block Prefetch", "cache"),
    # Conditional
    NamedExtension("zicond", "Zicond", "Conditional Operations", "cond"),
    # Bit manipulation
    NamedExtension("zba", "Zba", "Address Generation", "bit"),
    NamedExtension("zbb", "Zbb", "Basic Bit Manipulation", "bit"),
    NamedExtension("zbc", "Zbc", "Carry-less Multiply", "bit"),
    NamedExtension("zbs", "Zbs", "Single-bit Operations", "bit"),
    # Scalar cryptography
    NamedExtension("zbkb", "Zbkb", "Bit Manip for Crypto", "crypto"),
    NamedExtension("zbkc", "Zbkc", "Carry-less for Crypto", "crypto"),
    NamedExtension("zbkx", "Zbkx", "Crossbar for Crypto", "crypto"),
    NamedExtension("zk", "Zk", "Scalar Crypto (All)", "crypto"),
    NamedExtension("zkn", "Zkn", "NIST Algorithm Suite", "crypto"),
    NamedExtension("zknd", "Zknd", "AES Decryption", "crypto"),
    NamedExtension("zkne", "Zkne", "AES Encryption", "crypto"),
    NamedExtension("zknh", "Zknh", "SHA-2 Hash", "crypto"),
    NamedExtension("zks", "Zks", "ShangMi Suite", "crypto"),
    NamedExtension("zksed", "Zksed", "SM4 Block Cipher", "crypto"),
    NamedExtension("zksh", "Zksh", "SM3 Hash", "crypto"),
    NamedExtension("zkr", "Zkr", "Entropy Source", "crypto"),
    NamedExtension("zkt", "Zkt", "Data-Indep Timing", "crypto"),
    # Floating point
    NamedExtension("zfh", "Zfh", "Half-Precision Float", "fp"),
    NamedExtension("zfhmin", "Zfhmin", "Minimal Half-Precision", "fp"),
    NamedExtension("zfa", "Zfa", "Additional FP Instrs", "fp"),
    NamedExtension("zfinx", "Zfinx", "Float in Int Regs", "fp"),
    NamedExtension("zdinx", "Zdinx", "Double in Int Regs", "fp"),
    NamedExtension("zhinx", "Zhinx", "Half in Int Regs", "fp"),
    NamedExtension("zhinxmin", "Zhinxmin", "Min Half in Int Regs", "fp"),
    NamedExtension("zfbfmin", "Zfbfmin", "Scalar BFloat16", "fp"),
    # Compressed
    NamedExtension("zca", "Zca", "Compressed Base", "comp"),
    NamedExtension("zcb", "Zcb", "Compressed Basic Ops", "comp"),
    NamedExtension("zcd", "Zcd", "Compressed Double FP", "comp"),
    NamedExtension("zcf", "Zcf", "Compressed Single FP", "comp"),
    NamedExtension("zcmp", "Zcmp", "Compressed Push/Pop", "comp"),
    NamedExtension("zcmt", "Zcmt", "Compressed Table Jump", "comp"),
    NamedExtension("zcmop", "Zcmop", "Compressed May-Be-Ops", "comp"),
    NamedExtension("zclsd", "Zclsd", "Compressed LD/SD Pair", "comp"),
    # Atomics
    NamedExtension("zacas", "Zacas", "Atomic Compare-and-Swap", "atomic"),
    NamedExtension("zabha", "Zabha", "Atomic Byte/Halfword", "atomic"),
    NamedExtension("zaamo", "Zaamo", "Atomic AMO Subset", "atomic"),
    NamedExtension("zalrsc", "Zalrsc", "Atomic LR/SC Subset", "atomic"),
    NamedExtension("zawrs", "Zawrs", "Wait-on-Reservation-Set", "atomic"),
    # Memory model
    NamedExtension("za64rs", "Za64rs", "Reservation Set 64B", "mem"),
    NamedExtension("za128rs", "Za128rs", "Reservation Set 128B", "mem"),
    NamedExtension("zama16b", "Zama16b", "Misaligned Atomics 16B", "mem"),
    NamedExtension("zic64b", "Zic64b", "64-byte Cache Block", "mem"),
    NamedExtension("ziccamoa", "Ziccamoa", "Main Mem Atomics AMO", "mem"),
    NamedExtension("ziccamoc", "Ziccamoc", "Main Mem Atomics CAS", "mem"),
    NamedExtension("ziccif", "Ziccif", "Inst Fetch Coherence", "mem"),
    NamedExtension("zicclsm", "Zicclsm", "Load/Store Misaligned", "mem"),
    NamedExtension("ziccrse", "Ziccrse", "Reservation Set Size", "mem"),
    NamedExtension("ztso", "Ztso", "Total Store Ordering", "mem"),
    # Multiply
    NamedExtension("zmmul", "Zmmul", "Multiply Only (no Div)", "mul"),
    # Other
    NamedExtension("zimop", "Zimop", "May-Be-Operations", "other"),
    NamedExtension("zilsd", "Zilsd", "Load/Store Pair", "other"),
    # Vector
    NamedExtension("zve32f", "Zve32f", "Vector 32-bit Float", "vec"),
    NamedExtension("zve32x", "Zve32x", "Vector 32-bit Int", "vec"),
    NamedExtension("zve64d", "Zve64d", "Vector 64-bit Double", "vec"),
    NamedExtension("zve64f", "Zve64f", "Vector 64-bit Float", "vec"),
    NamedExtension("zve64x", "Zve64x", "Vector 64-bit Int", "vec"),
    NamedExtension("zvfh", "Zvfh", "Vector Half-Precision", "vec"),
    NamedExtension("zvfhmin", "Zvfhmin", "Min Vector Half-Prec", "vec"),
    NamedExtension("zvfbfmin", "Zvfbfmin", "Vector BFloat16 Conv", "vec"),
    NamedExtension("zvfbfwma", "Zvfbfwma", "Vector BF16 Widen MA", "vec"),
    NamedExtension("zvl32b", "Zvl32b", "VLEN >= 32 bits", "vec"),
    NamedExtension("zvl64b", "Zvl64b", "VLEN >= 64 bits", "vec"),
    NamedExtension("zvl128b", "Zvl128b", "VLEN >= 128 bits", "vec"),
    NamedExtension("zvl256b", "Zvl256b", "VLEN >= 256 bits", "vec"),
    NamedExtension("zvl512b", "Zvl512b", "VLEN >= 512 bits", "vec"),
    NamedExtension("zvl1024b", "Zvl1024b", "VLEN >= 1024 bits", "vec"),
    NamedExtension("zvl2048b", "Zvl2048b", "VLEN >= 2048 bits", "vec"),
    NamedExtension("zvl4096b", "Zvl4096b", "VLEN >= 4096 bits", "vec"),
    NamedExtension("zvl8192b", "Zvl8192b", "VLEN >= 8192 bits", "vec"),
    NamedExtension("zvl16384b", "Zvl16384b", "VLEN >= 16384 bits", "vec"),
    NamedExtension("zvl32768b", "Zvl32768b", "VLEN >= 32768 bits", "vec"),
    NamedExtension("zvl65536b", "Zvl65536b", "VLEN >= 65536 bits", "vec"),
    # Vector cryptography
    NamedExtension("zvbb", "Zvbb", "Vector Bit Manipulation", "vcrypto"),
    NamedExtension("zvbc", "Zvbc", "Vector Carry-less Mul", "vcrypto"),
    NamedExtension("zvkb", "Zvkb", "Vector Crypto Bit Manip", "vcrypto"),
    NamedExtension("zvkg", "Zvkg", "Vector GCM/GMAC", "vcrypto"),
    NamedExtension("zvkn", "Zvkn", "Vector NIST (All)", "vcrypto"),
    NamedExtension("zvknc", "Zvknc", "Vector NIST+Carryless", "vcrypto"),
    NamedExtension("zvkned", "Zvkned", "Vector AES", "vcrypto"),
    NamedExtension("zvkng", "Zvkng", "Vector NIST+GCM", "vcrypto"),
    NamedExtension("zvknha", "Zvknha", "Vector SHA-2 (256)", "vcrypto"),
    NamedExtension("zvknhb", "Zvknhb", "Vector SHA-2 (512)", "vcrypto"),
    NamedExtension("zvks", "Zvks", "Vector ShangMi (All)", "vcrypto"),
    NamedExtension("zvksc", "Zvksc", "Vector SM+Carryless", "vcrypto"),
    NamedExtension("zvksed", "Zvksed", "Vector SM4", "vcrypto"),
    NamedExtension("zvksg", "Zvksg", "Vector SM+GCM", "vcrypto"),
    NamedExtension("zvksh", "Zvksh", "Vector SM3", "vcrypto"),
    NamedExtension("zvkt", "Zvkt", "Vector Data-Indep Time", "vcrypto"),
)


S_EXTENSIONS: Tuple[NamedExtension, ...] = (
    # Virtual memory (Sv*)
    NamedExtension("svinval", "Svinval", "Fine-Grained TLB Inv", "vm"),
    NamedExtension("svnapot", "Svnapot", "NAPOT Translation", "vm"),
    NamedExtension("svpbmt", "Svpbmt", "Page-Based Mem Types", "vm"),
    NamedExtension("svade", "Svade", "A/D Update on Fault", "vm"),
    NamedExtension("svadu", "Svadu", "A/D Hardware Update", "vm"),
    NamedExtension("svbare", "Svbare", "Bare Translation Mode", "vm"),
    NamedExtension("svvptc", "Svvptc", "VPTC Invalidation", "vm"),
    # Supervisor (Ss*)
    NamedExtension("ssaia", "Ssaia", "Adv Interrupt Arch", "sup"),
    NamedExtension("ssccfg", "Ssccfg", "Counter Config", "sup"),
    NamedExtension("ssccptr", "Ssccptr", "Common Ptr Convention", "sup"),
    NamedExtension("sscofpmf", "Sscofpmf", "Count Overflow/Filter", "sup"),
    NamedExtension("sscounterenw", "Sscounterenw", "Counter Enables", "sup"),
    NamedExtension("sscsrind", "Sscsrind", "Indirect CSR Access", "sup"),
    NamedExtension("ssctr", "Ssctr", "Control Transfer Rec", "sup"),
    NamedExtension("ssdbltrp", "Ssdbltrp", "Double Trap", "sup"),
    NamedExtension("ssnpm", "Ssnpm", "Pointer Masking", "sup"),
    NamedExtension("sspm", "Sspm", "Pointer Masking", "sup"),
    NamedExtension("ssqosid", "Ssqosid", "QoS Identifiers", "sup"),
    NamedExtension("ssstateen", "Ssstateen", "State Enable", "sup"),
    NamedExtension("ssstrict", "Ssstrict", "No Non-Conforming Ext", "sup"),
    NamedExtension("sstc", "Sstc", "Supervisor Timer", "sup"),
    NamedExtension("sstvala", "Sstvala", "Trap Value Address", "sup"),
    NamedExtension("sstvecd", "Sstvecd", "Trap Vector Mode", "sup"),
    NamedExtension("ssu64xl", "Ssu64xl", "U-mode 64-bit", "sup"),
    # Machine (Sm*)
    NamedExtension("smaia", "Smaia", "Adv Interrupt Arch", "mach"),
    NamedExtension("smcdeleg", "Smcdeleg", "Counter Delegation", "mach"),
    NamedExtension("smcntrpmf", "Smcntrpmf", "Counter PMF", "mach"),
    NamedExtension("smcsrind", "Smcsrind", "Indirect CSR Access", "mach"),
    NamedExtension("smctr", "Smctr", "Control Transfer Rec", "mach"),
    NamedExtension("smdbltrp", "Smdbltrp", "Double Trap", "mach"),
    NamedExtension("smepmp", "Smepmp", "Enhanced PMP", "mach"),
    NamedExtension("smmpm", "Smmpm", "M-mode Ptr Masking", "mach"),
    NamedExtension("smnpm", "Smnpm", "Nesting Ptr Masking", "mach"),
    NamedExtension("smrnmi", "Smrnmi", "Resumable NMI", "mach"),
    NamedExtension("smstateen", "Smstateen", "State Enable", "mach"),
    # Hypervisor (Sh*)
    NamedExtension("sha", "Sha", "H-mode Ext Subset", "hyp"),
    NamedExtension("shcounterenw", "Shcounterenw", "Counter Enables", "hyp"),
    NamedExtension("shgatpa", "Shgatpa", "Guest Addr Translation", "hyp"),
    NamedExtension("shlcofideleg", "Shlcofideleg", "Lcof Interrupt Deleg", "hyp"),
    NamedExtension("shtvala", "Shtvala", "H-mode Trap Value", "hyp"),
    NamedExtension("shvsatpa", "Shvsatpa", "VS-mode Saturation", "hyp"),
    NamedExtension("shvstvala", "Shvstvala", "VS-mode Trap Value", "hyp"),
    NamedExtension("shvstvecd", "Shvstvecd", "VS-mode Trap Vector", "hyp"),
    # Debug (Sd*)
    NamedExtension("sdext", "Sdext", "External Debug", "debug"),
    NamedExtension("sdtrig", "Sdtrig", "Debug Triggers", "debug"),
    # User (Su*)
    NamedExtension("supm", "Supm", "U-mode Ptr Masking", "user"),
)


Z_CATEGORY_NAMES: Dict[str, str] = {
    'base': "Base",
    'hint': "Hints",
    'cache': "Cache",
    'cond': "Conditional",
    'bit': "Bit Manipulation",
    'crypto': "Cryptography",
    'fp': "Floating Point",
    'comp': "Compressed",
    'atomic': "Atomics",
    'mem': "Memory Model",
    'mul': "Multiply",
    'vec': "Vector",
    'vcrypto': "Vector Crypto",
    'other': "Other",
}

S_CATEGORY_NAMES: Dict[str, str] = {
    'vm': "Virtual Memory",
    'sup': "Supervisor",
    'mach': "Machine",
    'hyp': "Hypervisor",
    'debug': "Debug",
    'user': "User",
}

_NAMED_TABLES = {
    Namespace.Z: Z_EXTENSIONS,
    Namespace.S: S_EXTENSIONS,
}

_CATEGORY_TABLES = {
    Namespace.Z: Z_CATEGORY_NAMES,
    Namespace.S: S_CATEGORY_NAMES,
}


def named_extensions(namespace: Namespace) -> Tuple[NamedExtension, ...]:
    """Catalog table for a namespace, in declaration order"""
    return _NAMED_TABLES[namespace]


def category_names(namespace: Namespace) -> Dict[str, str]:
    """Category id -> display label table for a namespace"""
    return _CATEGORY_TABLES[namespace]


def lookup_base(code: str) -> Optional[BaseExtension]:
    """Find a base extension by its letter (case-insensitive)"""
    code = code.lower()
    for ext in STANDARD_EXTENSIONS:
        if ext.code == code:
            return ext
    return None


def match_named(token: str, namespace: Optional[Namespace] = None) -> List[NamedExtension]:
    """
    Every catalog entry whose pattern the token contains, in table order.

    Containment rather than equality lets versioned tokens such as
    "zicsr2p0" resolve. A token may match several entries: "zknh" yields
    Zk, Zkn and Zknh, "zfhmin" yields Zfh and Zfhmin.

    Args:
        token: Token from an ISA string (any case)
        namespace: Restrict the search to one table; None searches Z then S

    Returns:
        Matching NamedExtension entries (empty if none)
    """
    token = token.lower()
    tables = [_NAMED_TABLES[namespace]] if namespace else [Z_EXTENSIONS, S_EXTENSIONS]

    return [ext for table in tables for ext in table if ext.pattern in token]


def lookup_named(token: str, namespace: Optional[Namespace] = None) -> Optional[NamedExtension]:
    """First catalog entry (table order) whose pattern the token contains, or None"""
    matches = match_named(token, namespace)
    return matches[0] if matches else None


def category_label(category_id: str, namespace: Namespace) -> str:
    """Display label for a category id, "Other" if the id is unknown"""
    return _CATEGORY_TABLES[namespace].get(category_id, DEFAULT_CATEGORY_LABEL)
