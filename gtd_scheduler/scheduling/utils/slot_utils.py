"""
Wall-clock and slot arithmetic helpers.
"""

from datetime import date, datetime, time, timedelta
from ..core.time_slot import TimeSlot


def parse_hhmm(value: str) -> time:
    """Parse an "HH:MM" string into a time. Raises ValueError on bad input."""
    if not isinstance(value, str):
        raise ValueError(f"expected an HH:MM string, got {value!r}")
    parts = value.strip().split(":")
    if len(parts) != 2 or not all(p.isdigit() for p in parts):
        raise ValueError(f"expected an HH:MM string, got {value!r}")
    hours, minutes = int(parts[0]), int(parts[1])
    if not (0 <= hours <= 23 and 0 <= minutes <= 59):
        raise ValueError(f"time out of range: {value!r}")
    return time(hours, minutes)


def minutes_of_day(value) -> int:
    """Minutes since midnight for a time or datetime (seconds are dropped)."""
    return value.hour * 60 + value.minute


def at_time(day: date, wall_clock: time) -> datetime:
    """Combine a date with a wall-clock time, zeroing seconds."""
    return datetime.combine(day, wall_clock.replace(second=0, microsecond=0))


def add_minutes(moment: datetime, minutes: int) -> datetime:
    return moment + timedelta(minutes=minutes)


def slot_cursor(slot: TimeSlot, consumed_minutes: int) -> datetime:
    """First free instant of a slot after consumed_minutes have been packed into it."""
    return add_minutes(slot.start, consumed_minutes)


def remaining_minutes(slot: TimeSlot, consumed_minutes: int) -> int:
    """Capacity left in a slot after consumed_minutes have been packed into it."""
    return slot.duration_minutes() - consumed_minutes
