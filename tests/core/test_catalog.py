"""
Tests for the extension catalog.
"""

import pytest

from riscfetch.core.catalog import (
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
from riscfetch.core.structures import Namespace


class TestTables:
    """Consistency of the static tables"""

    def test_standard_order(self):
        assert [e.name for e in STANDARD_EXTENSIONS] == list("IEMAFDQCBVH")

    def test_patterns_are_lowercase(self):
        for ext in Z_EXTENSIONS + S_EXTENSIONS:
            assert ext.pattern == ext.pattern.lower()
            assert ext.pattern == ext.name.lower()

    def test_prefixes(self):
        assert all(e.pattern.startswith('z') for e in Z_EXTENSIONS)
        assert all(e.pattern.startswith('s') for e in S_EXTENSIONS)

    def test_no_duplicate_patterns(self):
        patterns = [e.pattern for e in Z_EXTENSIONS + S_EXTENSIONS]
        assert len(patterns) == len(set(patterns))

    def test_every_category_has_label(self):
        assert all(e.category in Z_CATEGORY_NAMES for e in Z_EXTENSIONS)
        assert all(e.category in S_CATEGORY_NAMES for e in S_EXTENSIONS)

    def test_namespace_accessors(self):
        assert named_extensions(Namespace.Z) is Z_EXTENSIONS
        assert named_extensions(Namespace.S) is S_EXTENSIONS
        assert category_names(Namespace.S) is S_CATEGORY_NAMES


class TestLookup:
    """Tests for lookup_base / lookup_named"""

    def test_base(self):
        ext = lookup_base('v')
        assert ext.name == "V"
        assert ext.description == "Vector (SIMD)"

    def test_base_uppercase(self):
        assert lookup_base('M').name == "M"

    def test_base_unknown(self):
        assert lookup_base('x') is None

    def test_named_exact(self):
        ext = lookup_named("zbb")
        assert ext.name == "Zbb"
        assert ext.category == "bit"

    def test_named_substring(self):
        assert lookup_named("zicsr2p0").name == "Zicsr"

    def test_named_first_in_table_order(self):
        assert lookup_named("zknh1p0").name == "Zk"

    def test_match_all_contained(self):
        assert [e.name for e in match_named("zknh1p0")] == ["Zk", "Zkn", "Zknh"]
        assert [e.name for e in match_named("zfhmin")] == ["Zfh", "Zfhmin"]

    def test_match_namespace_restricted(self):
        assert match_named("sstc", Namespace.Z) == []
        assert [e.name for e in match_named("svnapot", Namespace.S)] == ["Svnapot"]

    def test_match_none(self):
        assert match_named("xfoo") == []

    def test_named_namespace_restricted(self):
        assert lookup_named("sstc", Namespace.Z) is None
        assert lookup_named("sstc", Namespace.S).name == "Sstc"

    def test_named_case_insensitive(self):
        assert lookup_named("ZBA").name == "Zba"

    @pytest.mark.parametrize("token", ["", "xfoo", "rv64gc"])
    def test_named_unknown(self, token):
        assert lookup_named(token) is None


class TestCategoryLabel:
    """Tests for category_label"""

    def test_z(self):
        assert category_label("bit", Namespace.Z) == "Bit Manipulation"
        assert category_label("vcrypto", Namespace.Z) == "Vector Crypto"

    def test_s(self):
        assert category_label("vm", Namespace.S) == "Virtual Memory"

    def test_unknown_defaults_to_other(self):
        assert category_label("nope", Namespace.Z) == "Other"
        assert category_label("bit", Namespace.S) == "Other"
