"""
Tests for the detected-only and all-known projections.
"""

import itertools

from riscfetch.core.catalog import STANDARD_EXTENSIONS, Z_EXTENSIONS, S_EXTENSIONS
from riscfetch.core.parsing import parse_named_extensions_with_category
from riscfetch.core.projection import (
    group_by_category,
    all_known_with_status,
    all_standard_with_status,
    detected_view,
    extension_names,
)
from riscfetch.core.structures import ClassifiedExtension, Namespace


ISA = "rv64gcv_zba_zbb_zicond_zvl256b_zvkt_sstc_svpbmt_svinval"


def _ext(name, category):
    return ClassifiedExtension(name=name, description=name, category=category)


class TestGroupByCategory:
    """Tests for group_by_category"""

    def test_keys_sorted(self):
        items = [_ext("Zvkt", "vcrypto"), _ext("Zba", "bit"), _ext("Zicsr", "base")]
        assert list(group_by_category(items)) == ["base", "bit", "vcrypto"]

    def test_members_keep_input_order(self):
        items = [_ext("Zbs", "bit"), _ext("Zicsr", "base"), _ext("Zba", "bit")]
        groups = group_by_category(items)
        assert extension_names(groups["bit"]) == ["Zbs", "Zba"]

    def test_key_order_independent_of_input(self):
        items = [_ext("Zba", "bit"), _ext("Zicsr", "base"), _ext("Zvkt", "vcrypto")]
        expected = list(group_by_category(items))
        for perm in itertools.permutations(items):
            assert list(group_by_category(perm)) == expected

    def test_empty(self):
        assert group_by_category([]) == {}


class TestAllKnown:
    """Tests for the all-known views"""

    def test_z_covers_catalog(self):
        result = all_known_with_status(Namespace.Z, ISA)
        assert len(result) == len(Z_EXTENSIONS)
        assert extension_names(result) == [e.name for e in Z_EXTENSIONS]

    def test_s_covers_catalog(self):
        result = all_known_with_status(Namespace.S, ISA)
        assert len(result) == len(S_EXTENSIONS)

    def test_supported_matches_detected(self):
        for namespace in (Namespace.Z, Namespace.S):
            detected = {e.name for e in parse_named_extensions_with_category(ISA, namespace)}
            supported = {e.name for e in all_known_with_status(namespace, ISA) if e.supported}
            assert supported == detected

    def test_overlapping_matches_all_supported(self):
        result = all_known_with_status(Namespace.Z, "rv64gc_zfhmin")
        supported = [e.name for e in result if e.supported]
        assert supported == ["Zicsr", "Zifencei", "Zfh", "Zfhmin"]

    def test_nothing_supported_for_empty_isa(self):
        assert not any(e.supported for e in all_known_with_status(Namespace.Z, ""))

    def test_standard(self):
        result = all_standard_with_status("rv64imac")
        assert len(result) == len(STANDARD_EXTENSIONS)
        supported = [e.name for e in result if e.supported]
        assert supported == ["I", "M", "A", "C"]
        assert all(e.category == "base" for e in result)


class TestDetectedView:
    """Tests for detected_view"""

    def test_fields(self):
        view = detected_view(ISA)
        assert view.isa == ISA
        assert view.base == "I M A F D C V"
        assert view.vector == "Enabled, VLEN>=256"
        assert extension_names(view.s_extensions) == ["Sstc", "Svpbmt", "Svinval"]

    def test_z_groups(self):
        groups = detected_view(ISA).z_groups
        assert extension_names(groups["base"]) == ["Zicsr", "Zifencei"]
        assert extension_names(groups["bit"]) == ["Zba", "Zbb"]
        assert extension_names(groups["cond"]) == ["Zicond"]
        assert list(groups) == sorted(groups)

    def test_s_groups(self):
        groups = detected_view(ISA).s_groups
        assert extension_names(groups["vm"]) == ["Svpbmt", "Svinval"]
        assert extension_names(groups["sup"]) == ["Sstc"]

    def test_no_vector(self):
        assert detected_view("rv64gc").vector is None

    def test_empty(self):
        view = detected_view("")
        assert view.base == ""
        assert view.z_extensions == []
        assert view.s_extensions == []
