"""
Priority ordering for the assignment loop.
"""

from typing import List, Tuple
from ..core.task import PriorityLevel, ScheduleTask


def priority_ordinal(task: ScheduleTask) -> int:
    """URGENT: 4, HIGH: 3, MEDIUM: 2, LOW: 1"""
    return int(PriorityLevel(task.priority))


def task_sort_key(task: ScheduleTask) -> Tuple[int, int, int]:
    """
    Ascending sort key giving: higher priority first, then focus work before
    flexible work, then shorter estimates first. A missing estimate counts
    as 0 here even though it is placed with the default duration.
    """
    return (
        -priority_ordinal(task),
        0 if task.requires_focus else 1,
        task.estimated or 0,
    )


def sort_by_priority(tasks: List[ScheduleTask]) -> List[ScheduleTask]:
    """Stable sort; tasks that compare equal keep their incoming order."""
    return sorted(tasks, key=task_sort_key)
