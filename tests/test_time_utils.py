"""
Tests for appointment time arithmetic and the overlap rule.
"""
from datetime import time

import pytest

from apps.schedules.utils.time_utils import (
    CrossesMidnight,
    compute_end_time,
    format_time,
    intervals_conflict,
    parse_time,
)


class TestParseAndFormat:

    def test_parse_hh_mm(self):
        assert parse_time('09:45') == time(9, 45)

    def test_parse_drops_seconds(self):
        assert parse_time(time(9, 45, 30)) == time(9, 45)

    def test_parse_rejects_garbage(self):
        with pytest.raises(ValueError):
            parse_time('quarter past nine')

    def test_format_zero_pads(self):
        assert format_time(time(9, 5)) == '09:05'


class TestComputeEndTime:
    """Minutes roll over into hours; midnight is a hard stop."""

    def test_rolls_minutes_into_next_hour(self):
        assert compute_end_time('09:45', 30) == time(10, 15)

    def test_rolls_over_by_five_minutes(self):
        assert compute_end_time('09:45', 20) == time(10, 5)

    def test_within_the_same_hour(self):
        assert compute_end_time('10:00', 30) == time(10, 30)

    def test_multi_hour_duration(self):
        assert compute_end_time('09:30', 150) == time(12, 0)

    def test_ending_exactly_at_midnight_is_rejected(self):
        with pytest.raises(CrossesMidnight):
            compute_end_time('23:30', 30)

    def test_crossing_midnight_is_rejected(self):
        with pytest.raises(CrossesMidnight):
            compute_end_time('23:00', 90)

    def test_last_minute_of_the_day_is_allowed(self):
        assert compute_end_time('23:00', 59) == time(23, 59)

    def test_non_positive_duration_is_rejected(self):
        with pytest.raises(ValueError):
            compute_end_time('10:00', 0)


class TestIntervalsConflict:
    """Existing appointment is [10:00, 10:30)."""

    existing = (time(10, 0), time(10, 30))

    def test_start_inside_existing(self):
        assert intervals_conflict(time(10, 15), time(10, 45), *self.existing)

    def test_end_inside_existing(self):
        assert intervals_conflict(time(9, 45), time(10, 15), *self.existing)

    def test_same_interval(self):
        assert intervals_conflict(time(10, 0), time(10, 30), *self.existing)

    def test_back_to_back_after(self):
        assert not intervals_conflict(time(10, 30), time(11, 0), *self.existing)

    def test_back_to_back_before(self):
        assert not intervals_conflict(time(9, 30), time(10, 0), *self.existing)

    def test_enclosing_interval_is_not_reported(self):
        # Only the start and end points are tested against the existing interval
        assert not intervals_conflict(time(9, 30), time(11, 0), *self.existing)
