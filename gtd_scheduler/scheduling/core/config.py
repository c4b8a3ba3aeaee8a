"""
Per-user working-day configuration consumed by the scheduler.
"""

from dataclasses import dataclass
from datetime import time
from ..utils.slot_utils import parse_hhmm, minutes_of_day


class ConfigurationError(ValueError):
    """Raised when a working-day configuration cannot be scheduled against."""


# Defaults used by new profiles
DEFAULT_WORK_START = "09:00"
DEFAULT_WORK_END = "17:00"
DEFAULT_LUNCH_START = "12:00"
DEFAULT_LUNCH_DURATION = 60
DEFAULT_BREAK_DURATION = 15
DEFAULT_LONG_BREAK_DURATION = 30
DEFAULT_POMODORO_DURATION = 25
DEFAULT_SHORT_BREAK_INTERVAL = 3


@dataclass(frozen=True)
class TimeConfiguration:
    """
    Work hours, lunch window and pomodoro cadence for one scheduling run.

    All times are same-day "HH:MM" wall-clock strings; overnight work days
    are rejected. Durations are minutes.
    """
    work_start_time: str = DEFAULT_WORK_START
    work_end_time: str = DEFAULT_WORK_END
    lunch_start_time: str = DEFAULT_LUNCH_START
    lunch_duration: int = DEFAULT_LUNCH_DURATION
    break_duration: int = DEFAULT_BREAK_DURATION
    long_break_duration: int = DEFAULT_LONG_BREAK_DURATION
    pomodoro_duration: int = DEFAULT_POMODORO_DURATION
    short_break_interval: int = DEFAULT_SHORT_BREAK_INTERVAL

    def __post_init__(self):
        for field_name in ("work_start_time", "work_end_time", "lunch_start_time"):
            try:
                parse_hhmm(getattr(self, field_name))
            except ValueError as e:
                raise ConfigurationError(f"{field_name}: {e}") from e

        if self.work_start >= self.work_end:
            raise ConfigurationError(
                f"work_start_time {self.work_start_time} must be before work_end_time {self.work_end_time}"
            )
        if self.pomodoro_duration <= 0:
            raise ConfigurationError("pomodoro_duration must be positive")
        if self.break_duration <= 0:
            raise ConfigurationError("break_duration must be positive")
        if self.long_break_duration <= 0:
            raise ConfigurationError("long_break_duration must be positive")
        if self.short_break_interval < 1:
            raise ConfigurationError("short_break_interval must be at least 1")
        if self.lunch_duration < 0:
            raise ConfigurationError("lunch_duration cannot be negative")

    @property
    def work_start(self) -> time:
        return parse_hhmm(self.work_start_time)

    @property
    def work_end(self) -> time:
        return parse_hhmm(self.work_end_time)

    @property
    def lunch_start(self) -> time:
        return parse_hhmm(self.lunch_start_time)

    def is_lunch_time(self, moment) -> bool:
        """True if moment's time of day is inside [lunch start, lunch start + duration)."""
        lunch_start = minutes_of_day(self.lunch_start)
        current = minutes_of_day(moment)
        return lunch_start <= current < lunch_start + self.lunch_duration

    @classmethod
    def from_preferences(cls, preferences) -> "TimeConfiguration":
        """Build a configuration from any object carrying the user preference columns."""
        return cls(
            work_start_time=getattr(preferences, "work_start_time", None) or DEFAULT_WORK_START,
            work_end_time=getattr(preferences, "work_end_time", None) or DEFAULT_WORK_END,
            lunch_start_time=getattr(preferences, "lunch_start_time", None) or DEFAULT_LUNCH_START,
            lunch_duration=_int_or_default(getattr(preferences, "lunch_duration", None), DEFAULT_LUNCH_DURATION),
            break_duration=_int_or_default(getattr(preferences, "break_duration", None), DEFAULT_BREAK_DURATION),
            long_break_duration=_int_or_default(getattr(preferences, "long_break_duration", None), DEFAULT_LONG_BREAK_DURATION),
            pomodoro_duration=_int_or_default(getattr(preferences, "pomodoro_duration", None), DEFAULT_POMODORO_DURATION),
            short_break_interval=_int_or_default(getattr(preferences, "short_break_interval", None), DEFAULT_SHORT_BREAK_INTERVAL),
        )


def _int_or_default(value, default: int) -> int:
    return default if value is None else int(value)
