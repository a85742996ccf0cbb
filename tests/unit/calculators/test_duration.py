"""Tests for duration conversion and formatting."""

import pytest

from worklog.calculators.duration import (
    DURATION_PRESETS,
    format_duration,
    format_hours,
    hours_to_minutes,
    is_valid_duration_increment,
    minutes_to_hours,
)


class TestConversion:
    def test_minutes_to_hours(self):
        assert minutes_to_hours(90) == 1.5
        assert minutes_to_hours(0) == 0.0

    def test_minutes_to_hours_is_unrounded(self):
        assert minutes_to_hours(10) == pytest.approx(0.1666666, rel=1e-5)

    def test_hours_to_minutes_rounds(self):
        assert hours_to_minutes(1.5) == 90
        assert hours_to_minutes(0.1) == 6
        assert hours_to_minutes(1 / 3) == 20

    @pytest.mark.parametrize("hours", DURATION_PRESETS)
    def test_presets_are_quarter_hours(self, hours):
        assert is_valid_duration_increment(hours)

    def test_rejects_non_quarter_hours(self):
        assert not is_valid_duration_increment(1.1)


class TestFormatting:
    """Test suite for duration formatting."""

    def test_format_hours_singular(self):
        assert format_hours(1) == "1.0 hr"

    def test_format_hours_plural(self):
        assert format_hours(7.333) == "7.3 hrs"
        assert format_hours(0) == "0.0 hrs"

    def test_format_duration_short(self):
        assert format_duration(90) == "1.5 hrs"
        assert format_duration(120) == "2 hrs"

    @pytest.mark.parametrize(
        "minutes,expected",
        [(90, "1 hrs 30 mins"), (45, "45 mins"), (120, "2 hrs"), (0, "0 mins")],
    )
    def test_format_duration_long(self, minutes, expected):
        assert format_duration(minutes, style="long") == expected
