"""Tests for week bucketing of the monthly view."""

import datetime as dt

import pytest

from worklog.aggregators.week_grouper import (
    find_week,
    format_week_label,
    group_by_week,
    month_week_spans,
)


def _bounds(spans):
    return [(s.start_date, s.end_date) for s in spans]


class TestMonthWeekSpans:
    """Test suite for month_week_spans."""

    def test_january_2025(self):
        spans = month_week_spans(dt.date(2025, 1, 15))
        assert [s.week_number for s in spans] == [1, 2, 3, 4, 5]
        assert [(s.start_date.day, s.end_date.day) for s in spans] == [
            (1, 5),
            (6, 12),
            (13, 19),
            (20, 26),
            (27, 31),
        ]

    def test_month_starting_monday_ending_sunday_has_four_weeks(self):
        """February 2021 starts on a Monday and ends on a Sunday."""
        spans = month_week_spans(dt.date(2021, 2, 1))
        assert len(spans) == 4
        assert all(s.start_date.weekday() == 0 for s in spans)
        assert all(s.end_date.weekday() == 6 for s in spans)

    def test_month_starting_sunday_has_six_weeks(self):
        """August 2021 starts on a Sunday: week 1 is a single day."""
        spans = month_week_spans(dt.date(2021, 8, 20))
        assert len(spans) == 6
        assert spans[0].start_date == spans[0].end_date == dt.date(2021, 8, 1)
        assert spans[-1].end_date == dt.date(2021, 8, 31)

    def test_month_starting_monday(self):
        spans = month_week_spans(dt.date(2025, 9, 1))
        assert _bounds(spans)[0] == (dt.date(2025, 9, 1), dt.date(2025, 9, 7))

    def test_month_ending_sunday(self):
        spans = month_week_spans(dt.date(2025, 11, 5))
        assert len(spans) == 5
        assert spans[-1].start_date == dt.date(2025, 11, 24)
        assert spans[-1].end_date == dt.date(2025, 11, 30)

    @pytest.mark.parametrize("year,month", [(2024, 2), (2025, 3), (2025, 6), (2026, 12)])
    def test_spans_partition_the_month(self, year, month):
        spans = month_week_spans(dt.date(year, month, 1))
        assert 4 <= len(spans) <= 6
        assert spans[0].start_date.day == 1
        for prev, nxt in zip(spans, spans[1:]):
            assert nxt.start_date == prev.end_date + dt.timedelta(days=1)
            assert nxt.start_date.weekday() == 0
        assert all(s.start_date.month == month and s.end_date.month == month for s in spans)

    def test_accepts_datetime(self):
        assert len(month_week_spans(dt.datetime(2025, 1, 31, 23, 0))) == 5


class TestFormatWeekLabel:
    def test_range_label(self):
        assert (
            format_week_label(3, dt.date(2025, 1, 13), dt.date(2025, 1, 19))
            == "Week 3 (13-19 Jan)"
        )

    def test_single_day_label(self):
        assert (
            format_week_label(1, dt.date(2021, 8, 1), dt.date(2021, 8, 1))
            == "Week 1 (1 Aug)"
        )


class TestGroupByWeek:
    """Test suite for group_by_week."""

    def test_only_weeks_with_entries(self, make_entry):
        entries = [
            make_entry(entry_date=dt.date(2025, 1, 2)),
            make_entry(entry_date=dt.date(2025, 1, 28)),
        ]
        groups = group_by_week(entries, dt.date(2025, 1, 15))
        assert [g.week_number for g in groups] == [1, 5]
        assert groups[0].label == "Week 1 (1-5 Jan)"
        assert groups[1].start_date == dt.date(2025, 1, 27)
        assert groups[1].end_date == dt.date(2025, 1, 31)

    def test_week_numbering_january_2025(self, make_entry):
        entries = [
            make_entry(entry_date=dt.date(2025, 1, day)) for day in (2, 3, 7, 15, 28)
        ]
        groups = group_by_week(entries, dt.date(2025, 1, 15))
        assert [g.week_number for g in groups] == [1, 2, 3, 5]
        assert [len(g.entries) for g in groups] == [2, 1, 1, 1]
        assert 4 not in {g.week_number for g in groups}

    def test_empty_input(self):
        assert group_by_week([], dt.date(2025, 1, 15)) == []

    def test_entries_newest_first_within_week(self, make_entry):
        entries = [
            make_entry(entry_date=dt.date(2025, 1, 13)),
            make_entry(entry_date=dt.date(2025, 1, 17)),
            make_entry(entry_date=dt.date(2025, 1, 15)),
        ]
        (group,) = group_by_week(entries, dt.date(2025, 1, 15))
        assert [e.entry_date.day for e in group.entries] == [17, 15, 13]

    def test_subtotals_and_conservation(self, make_entry):
        entries = [
            make_entry(entry_date=dt.date(2025, 1, 6), duration_minutes=45),
            make_entry(entry_date=dt.date(2025, 1, 12), duration_minutes=15),
            make_entry(entry_date=dt.date(2025, 1, 31), duration_minutes=50),
        ]
        groups = group_by_week(entries, dt.date(2025, 1, 1))
        assert [g.total_minutes for g in groups] == [60, 50]
        assert groups[0].total_hours == 1.0
        assert sum(len(g.entries) for g in groups) == len(entries)

    def test_out_of_month_entries_skipped(self, make_entry):
        entries = [
            make_entry(entry_date=dt.date(2024, 12, 31)),
            make_entry(entry_date=dt.date(2025, 1, 1)),
        ]
        groups = group_by_week(entries, dt.date(2025, 1, 15))
        assert len(groups) == 1
        assert len(groups[0].entries) == 1


class TestFindWeek:
    def test_outside_month(self):
        spans = month_week_spans(dt.date(2025, 1, 1))
        assert find_week(spans, dt.date(2025, 2, 1)) is None
        assert find_week(spans, dt.date(2025, 1, 19)).week_number == 3
