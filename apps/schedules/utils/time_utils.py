"""
Time-of-day arithmetic for appointments.

Appointment times are wall-clock times within a single day ("HH:MM").
"""
from datetime import time

MINUTES_PER_DAY = 24 * 60


def parse_time(value) -> time:
    """
    Parse "HH:MM" (or "HH:MM:SS") into a time.

    Raises:
        ValueError: malformed value
    """
    if isinstance(value, time):
        return value.replace(second=0, microsecond=0)
    parts = str(value).strip().split(':')
    if len(parts) not in (2, 3):
        raise ValueError(f"Invalid time '{value}', expected HH:MM")
    hour, minute = int(parts[0]), int(parts[1])
    return time(hour, minute)


def format_time(value: time) -> str:
    return f"{value.hour:02d}:{value.minute:02d}"


def to_minutes(value: time) -> int:
    """Minutes since midnight."""
    return value.hour * 60 + value.minute


class CrossesMidnight(ValueError):
    """Raised when an appointment would end at or after midnight."""


def compute_end_time(start, duration_minutes: int) -> time:
    """
    Add a duration to a start time, rolling minutes into hours.

    09:45 + 30 -> 10:15

    Raises:
        ValueError: non-positive duration
        CrossesMidnight: the end lands at or past midnight
    """
    start = parse_time(start)
    if duration_minutes <= 0:
        raise ValueError("Duration must be positive")

    end = to_minutes(start) + duration_minutes
    if end >= MINUTES_PER_DAY:
        raise CrossesMidnight(f"{format_time(start)} + {duration_minutes} min crosses midnight")
    hours, minutes = divmod(end, 60)
    return time(hours, minutes)


def intervals_conflict(new_start: time, new_end: time, start: time, end: time) -> bool:
    """
    Conflict rule for half-open intervals [start, end).

    A new interval conflicts when it starts inside the existing one or ends
    inside it. Touching boundaries do not conflict.
    """
    return (start <= new_start < end) or (start < new_end <= end)
