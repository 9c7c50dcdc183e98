"""Tests for age-band normalization and bucketing."""

import math

import pytest

from clubcoach.planning.age_band import (
    normalize_age_band,
    parse_age_band_range,
    resolve_plan_band,
    sort_age_bands,
)


class TestNormalizeAgeBand:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("9-11", "09-11"),
            ("09-11 anos", "09-11"),
            ("6 - 8", "06-08"),
            ("Turma 12-14", "12-14"),
        ],
    )
    def test_zero_pads_ranges(self, raw, expected):
        assert normalize_age_band(raw) == expected

    def test_unparseable_text_is_trimmed_not_rejected(self):
        assert normalize_age_band("  Sub 12 ") == "Sub 12"

    def test_empty_values(self):
        assert normalize_age_band(None) == ""
        assert normalize_age_band("") == ""


class TestParseAgeBandRange:
    def test_parses_bounds(self):
        parsed = parse_age_band_range("9-11 anos")
        assert parsed.start == 9
        assert parsed.end == 11
        assert parsed.label == "09-11"

    def test_unparseable_band_gets_infinite_bounds(self):
        parsed = parse_age_band_range("Adulto")
        assert math.isinf(parsed.start)
        assert math.isinf(parsed.end)
        assert parsed.label == "Adulto"

    def test_malformed_bands_sort_last(self):
        assert sort_age_bands(["Adulto", "12-14", "6-8", "09-11"]) == ["6-8", "09-11", "12-14", "Adulto"]


class TestResolvePlanBand:
    @pytest.mark.parametrize(
        ("age_band", "expected"),
        [
            ("6-8", "06-08"),
            ("5-7", "06-08"),
            ("9-11", "09-11"),
            ("7-10", "09-11"),
            ("10-13", "12-14"),
            ("12-14", "12-14"),
            ("15-17", "12-14"),
            ("Adulto", "12-14"),
            ("", "12-14"),
        ],
    )
    def test_buckets_by_upper_bound(self, age_band, expected):
        assert resolve_plan_band(age_band) == expected

    @pytest.mark.parametrize("age_band", ["6-8", "9-11 anos", "10-13", "Adulto", "5 - 7"])
    def test_bucketing_is_idempotent(self, age_band):
        """Re-normalizing an already-normalized band yields the same bucket."""
        normalized = normalize_age_band(age_band)
        assert resolve_plan_band(normalized) == resolve_plan_band(age_band)
        assert resolve_plan_band(resolve_plan_band(age_band)) == resolve_plan_band(age_band)
