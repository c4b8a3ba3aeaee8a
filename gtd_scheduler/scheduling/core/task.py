"""
Value types the scheduler reads and produces.

These are plain in-memory records; the service layer builds them from
database rows and writes assignments back.
"""

import enum
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional


class PriorityLevel(int, enum.Enum):
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    URGENT = 4


class ItemStatus(str, enum.Enum):
    INBOX = "INBOX"
    NEXT_ACTION = "NEXT_ACTION"
    PROJECT = "PROJECT"
    WAITING_FOR = "WAITING_FOR"
    SOMEDAY_MAYBE = "SOMEDAY_MAYBE"
    REFERENCE = "REFERENCE"
    SCHEDULED = "SCHEDULED"
    COMPLETED = "COMPLETED"


# Only these statuses are considered by the auto-scheduler
ACTIONABLE_STATUSES = (ItemStatus.NEXT_ACTION, ItemStatus.PROJECT)

DEFAULT_TASK_DURATION = 30  # minutes


@dataclass
class ScheduleContext:
    """A weekday + time-of-day window in which a task may be worked on."""
    id: Optional[int] = None
    name: str = ""
    monday_enabled: bool = False
    tuesday_enabled: bool = False
    wednesday_enabled: bool = False
    thursday_enabled: bool = False
    friday_enabled: bool = False
    saturday_enabled: bool = False
    sunday_enabled: bool = False
    start_time: str = "09:00"
    end_time: str = "17:00"

    def is_day_enabled(self, weekday: int) -> bool:
        """weekday follows datetime.weekday(): Monday=0 ... Sunday=6."""
        flags = (
            self.monday_enabled,
            self.tuesday_enabled,
            self.wednesday_enabled,
            self.thursday_enabled,
            self.friday_enabled,
            self.saturday_enabled,
            self.sunday_enabled,
        )
        return bool(flags[weekday])


@dataclass
class ScheduleTask:
    id: int
    title: str
    priority: PriorityLevel = PriorityLevel.MEDIUM
    estimated: Optional[int] = None  # minutes
    requires_focus: bool = False
    contexts: List[ScheduleContext] = field(default_factory=list)
    depends_on: List[int] = field(default_factory=list)

    # Candidate selection fields
    status: ItemStatus = ItemStatus.NEXT_ACTION
    planned_date: Optional[datetime] = None
    due_date: Optional[datetime] = None

    def __post_init__(self):
        if not isinstance(self.priority, PriorityLevel):
            self.priority = coerce_priority(self.priority)

    @property
    def duration_minutes(self) -> int:
        """Minutes to reserve when placing this task."""
        estimated = int(self.estimated or 0)
        if estimated > 0:
            return estimated
        return DEFAULT_TASK_DURATION


@dataclass(frozen=True)
class ScheduledAssignment:
    task_id: int
    planned_date: datetime
    estimated: int


def coerce_priority(value) -> PriorityLevel:
    """Accept a PriorityLevel, its ordinal, or its name ("HIGH", "high")."""
    if isinstance(value, PriorityLevel):
        return value
    if isinstance(value, str):
        try:
            return PriorityLevel[value.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown priority: {value!r}")
    return PriorityLevel(int(value))


def is_candidate(task: ScheduleTask, target_date: date) -> bool:
    """Actionable, not yet planned, and due on or after the day being scheduled."""
    if task.status not in ACTIONABLE_STATUSES:
        return False
    if task.planned_date is not None:
        return False
    if task.due_date is None:
        return False
    due_day = task.due_date.date() if isinstance(task.due_date, datetime) else task.due_date
    return due_day >= target_date


def select_candidates(tasks: List[ScheduleTask], target_date: date) -> List[ScheduleTask]:
    return [task for task in tasks if is_candidate(task, target_date)]
