"""Tests for contrast_checker.core.conformance — AA/AAA thresholds."""

import pytest
from contrast_checker.core.conformance import conformance_levels, meets_aa, meets_aaa, threshold
from contrast_checker.core.types import TextSize


class TestMeetsAA:
    def test_boundary_passes(self):
        assert meets_aa(4.5, TextSize.NORMAL) is True

    def test_just_below_fails(self):
        assert meets_aa(4.4999, TextSize.NORMAL) is False

    def test_default_is_normal_text(self):
        assert meets_aa(4.5) is True
        assert meets_aa(4.0) is False

    def test_large_text(self):
        assert meets_aa(3.0, TextSize.LARGE) is True
        assert meets_aa(2.9999, TextSize.LARGE) is False


class TestMeetsAAA:
    def test_normal(self):
        assert meets_aaa(7.0) is True
        assert meets_aaa(6.9999) is False

    def test_large(self):
        assert meets_aaa(4.5, TextSize.LARGE) is True
        assert meets_aaa(4.4999, TextSize.LARGE) is False


class TestThreshold:
    def test_values(self):
        assert threshold('AA') == 4.5
        assert threshold('AA', TextSize.LARGE) == 3.0
        assert threshold('AAA') == 7.0
        assert threshold('AAA', TextSize.LARGE) == 4.5

    def test_case_insensitive(self):
        assert threshold('aaa') == 7.0

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            threshold('A')


class TestConformanceLevels:
    def test_middle_ratio(self):
        assert conformance_levels(5.0) == {'AA': True, 'AA-large': True, 'AAA': False, 'AAA-large': True}

    def test_max_ratio_passes_everything(self):
        assert all(conformance_levels(21.0).values())

    def test_min_ratio_fails_everything(self):
        assert not any(conformance_levels(1.0).values())
