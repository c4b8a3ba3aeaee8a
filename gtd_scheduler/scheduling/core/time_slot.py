"""
Time slot representation for the scheduling system.
"""

from datetime import datetime, timedelta


class TimeSlot:
    """
    One interval of the working day. Each slot is exactly one thing:
    - A focus slot (is_focus_time=True), sized to one pomodoro
    - A break slot (is_break=True), short or long

    Slots are never mutated during a run; consumed capacity is tracked
    by the scheduler per slot index.
    """
    __slots__ = ("start", "end", "is_focus_time", "is_break")

    def __init__(self, start: datetime, end: datetime, is_focus_time: bool = False):
        self.start = start
        self.end = end
        self.is_focus_time = is_focus_time
        self.is_break = not is_focus_time

    def duration(self) -> timedelta:
        return self.end - self.start

    def duration_minutes(self) -> int:
        return int(self.duration().total_seconds() // 60)

    def __eq__(self, other):
        if not isinstance(other, TimeSlot):
            return NotImplemented
        return (self.start, self.end, self.is_focus_time) == (other.start, other.end, other.is_focus_time)

    def __hash__(self):
        return hash((self.start, self.end, self.is_focus_time))

    def __repr__(self):
        kind = "FocusSlot" if self.is_focus_time else "BreakSlot"
        return f"{kind}({self.start.strftime('%H:%M')} - {self.end.strftime('%H:%M')})"
