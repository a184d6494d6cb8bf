"""
Unit tests for version threshold rules.
"""

import pytest

from questpal.palette.layout import (
    COLOR_RULES,
    NAME_RULES,
    Rule,
    has_section_header,
    resolve,
    resolve_layout,
)
from questpal.palette.types import ColorLayout


class TestSectionHeader:
    @pytest.mark.parametrize('version', [0x100, 0x190, 0x191, 0x192])
    def test_no_header_up_to_threshold(self, version):
        assert not has_section_header(version, 200)

    @pytest.mark.parametrize('version', [0x193, 0x1A0, 0x250])
    def test_header_above_threshold(self, version):
        assert has_section_header(version, 0)

    def test_cycles_follow_header(self):
        assert resolve_layout(0x192, 200).cycles is False
        assert resolve_layout(0x193, 0).cycles is True


class TestColorRules:
    def test_build_72_is_legacy(self):
        assert resolve(COLOR_RULES, 0x192, 72, 0) == ColorLayout.LEGACY

    def test_build_73_is_extended(self):
        assert resolve(COLOR_RULES, 0x192, 73, 0) == ColorLayout.EXTENDED

    def test_older_version_ignores_build(self):
        assert resolve(COLOR_RULES, 0x191, 9999, 0) == ColorLayout.LEGACY

    def test_newer_version_ignores_build(self):
        assert resolve(COLOR_RULES, 0x193, 0, 0) == ColorLayout.EXTENDED

    @pytest.mark.parametrize(
        'sub_version,expected',
        [(0, ColorLayout.EXTENDED), (3, ColorLayout.EXTENDED), (4, ColorLayout.NEWEST), (7, ColorLayout.NEWEST)],
    )
    def test_sub_version_threshold(self, sub_version, expected):
        assert resolve(COLOR_RULES, 0x1A0, 80, sub_version) == expected


class TestNameRules:
    def test_build_75_resets_names(self):
        assert resolve(NAME_RULES, 0x192, 75, 0) is None

    def test_build_76_reads_old_count(self):
        assert resolve(NAME_RULES, 0x192, 76, 0) == 256

    def test_sub_version_2_reads_old_count(self):
        assert resolve(NAME_RULES, 0x1A0, 80, 2) == 256

    def test_sub_version_3_reads_512(self):
        assert resolve(NAME_RULES, 0x1A0, 80, 3) == 512

    def test_old_version_resets_names(self):
        assert resolve(NAME_RULES, 0x190, 100, 0) is None


class TestResolve:
    def test_first_match_wins(self):
        rules = (Rule(1, 0, 0, 'first'), Rule(1, 0, 0, 'second'))
        assert resolve(rules, 5, 0, 0) == 'first'

    def test_no_match_raises(self):
        with pytest.raises(LookupError):
            resolve((Rule(0x200, 0, 0, 'x'),), 0x100, 0, 0)

    def test_full_layout(self):
        layout = resolve_layout(0x1A0, 80, 4)
        assert layout.header
        assert layout.sub_version == 4
        assert layout.colors == ColorLayout.NEWEST
        assert layout.names == 512
        assert layout.cycles
