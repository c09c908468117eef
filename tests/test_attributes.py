"""Tests for selection and attribute draws.

Functions under test in staffgen/utils/selection.py and
staffgen/population/sampler/attributes.py.
"""

import random

import pytest

from staffgen.core.models import MS_PER_YEAR, Gender
from staffgen.population.sampler.attributes import (
    birth_interval,
    format_timestamp,
    generate_birthdate,
    generate_gender,
    generate_workload,
)
from staffgen.utils import pick

# 2023-11-14T22:13:20.000Z
NOW_MS = 1_700_000_000_000


class TestPick:
    """Test pick() index selection."""

    def test_zero_draw_picks_first(self, sequence_source):
        assert pick(["a", "b", "c"], sequence_source([0.0])) == "a"

    def test_high_draw_picks_last(self, sequence_source):
        assert pick(["a", "b", "c"], sequence_source([0.9999])) == "c"

    def test_index_is_floor_of_scaled_draw(self, sequence_source):
        items = [10, 20, 30, 40]
        assert pick(items, sequence_source([0.5])) == 30
        assert pick(items, sequence_source([0.49])) == 20
        assert pick(items, sequence_source([0.25])) == 20

    def test_empty_sequence_raises(self, sequence_source):
        with pytest.raises(IndexError):
            pick([], sequence_source([0.3]))

    def test_every_element_reachable(self):
        rng = random.Random(0)
        seen = {pick("abcde", rng) for _ in range(500)}
        assert seen == set("abcde")


class TestGenderAndWorkload:
    def test_gender_draw(self, sequence_source):
        assert generate_gender(sequence_source([0.1])) == Gender.MALE
        assert generate_gender(sequence_source([0.6])) == Gender.FEMALE

    def test_workload_draw(self, sequence_source):
        draws = [0.0, 0.3, 0.6, 0.99]
        src = sequence_source(draws)
        assert [generate_workload(src) for _ in draws] == [10, 20, 30, 40]

    def test_workload_domain(self):
        rng = random.Random(5)
        assert {generate_workload(rng) for _ in range(400)} == {10, 20, 30, 40}


class TestFormatTimestamp:
    def test_epoch(self):
        assert format_timestamp(0) == "1970-01-01T00:00:00.000Z"

    def test_millisecond_precision(self):
        assert format_timestamp(NOW_MS + 456) == "2023-11-14T22:13:20.456Z"

    def test_fraction_truncated_toward_zero(self):
        assert format_timestamp(1.9) == "1970-01-01T00:00:00.001Z"
        assert format_timestamp(-1.5) == "1969-12-31T23:59:59.999Z"

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_rejected(self, value):
        with pytest.raises(ValueError):
            format_timestamp(value)

    def test_out_of_range_rejected(self):
        with pytest.raises(ValueError):
            format_timestamp(-1e6 * MS_PER_YEAR)


class TestGenerateBirthdate:
    """Test generate_birthdate() against a fixed reference time."""

    def test_year_length_constant(self):
        assert MS_PER_YEAR == 31_557_600_000

    def test_interval_bounds(self):
        earliest, latest = birth_interval(20, 30, NOW_MS)
        assert earliest == NOW_MS - 30 * MS_PER_YEAR
        assert latest == NOW_MS - 20 * MS_PER_YEAR

    def test_zero_draw_gives_oldest(self, sequence_source):
        result = generate_birthdate(20, 30, sequence_source([0.0]), NOW_MS)
        assert result == "1993-11-14T10:13:20.000Z"

    def test_midpoint_draw(self, sequence_source):
        result = generate_birthdate(20, 30, sequence_source([0.5]), NOW_MS)
        assert result == "1998-11-14T16:13:20.000Z"

    def test_equal_bounds(self, sequence_source):
        result = generate_birthdate(0, 0, sequence_source([0.7]), NOW_MS)
        assert result == "2023-11-14T22:13:20.000Z"

    def test_inverted_range_accepted(self, sequence_source):
        """An inverted range still yields a timestamp, anchored at max_age."""
        result = generate_birthdate(30, 20, sequence_source([0.0]), NOW_MS)
        assert result == "2003-11-14T22:13:20.000Z"

    def test_fractional_ages(self, sequence_source):
        result = generate_birthdate(0.5, 0.5, sequence_source([0.0]), NOW_MS)
        assert result == format_timestamp(NOW_MS - 0.5 * MS_PER_YEAR)

    def test_numeric_strings_accepted(self, sequence_source):
        result = generate_birthdate("20", "30", sequence_source([0.0]), NOW_MS)
        assert result == "1993-11-14T10:13:20.000Z"

    @pytest.mark.parametrize("bad", [None, "abc", [20]])
    def test_non_numeric_rejected(self, bad, sequence_source):
        with pytest.raises(ValueError):
            generate_birthdate(bad, 30, sequence_source([0.0]), NOW_MS)

    def test_nan_age_rejected(self, sequence_source):
        with pytest.raises(ValueError):
            generate_birthdate(float("nan"), 30, sequence_source([0.0]), NOW_MS)

    def test_defaults_to_wall_clock(self):
        result = generate_birthdate(0, 0, random.Random(1))
        assert result.endswith("Z")
        assert result[:2] in ("20", "21")
