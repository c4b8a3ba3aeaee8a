"""
Deterministic day scheduler: slot generation, task prioritization and
greedy first-fit assignment.

Every function takes the TimeConfiguration explicitly; nothing here touches
the database, so a run is a pure function of (config, tasks, date).
"""

import logging
from datetime import date
from typing import List, Optional
from .config import TimeConfiguration
from .task import ScheduleTask, ScheduledAssignment, select_candidates
from .time_slot import TimeSlot
from ..constraints.context_constraints import is_slot_allowed
from ..scoring.priority_scoring import sort_by_priority
from ..algorithms.dependencies import order_by_dependencies
from ..utils.slot_utils import at_time, add_minutes, slot_cursor, remaining_minutes

logger = logging.getLogger(__name__)

# ================================
# SLOT GENERATION
# ================================

def generate_slots(config: TimeConfiguration, target_date: date) -> List[TimeSlot]:
    """
    Lay out the working day as focus and break slots.

    Lunch produces no slot; the cursor simply skips ahead by the lunch
    duration. After short_break_interval focus slots a break is inserted and
    the counter resets. The last slot is clipped to the end of the work day.
    """
    cursor = at_time(target_date, config.work_start)
    day_end = at_time(target_date, config.work_end)

    slots: List[TimeSlot] = []
    focus_session_count = 0

    while cursor < day_end:
        if config.is_lunch_time(cursor):
            cursor = add_minutes(cursor, config.lunch_duration)
            continue

        if focus_session_count < config.short_break_interval:
            length = config.pomodoro_duration
            is_focus = True
            focus_session_count += 1
        else:
            if focus_session_count == config.short_break_interval:
                length = config.long_break_duration
            else:
                length = config.break_duration
            is_focus = False
            focus_session_count = 0

        slot_end = add_minutes(cursor, length)
        slots.append(TimeSlot(cursor, min(slot_end, day_end), is_focus_time=is_focus))
        cursor = slot_end

    return slots

# ================================
# TASK PRIORITIZATION
# ================================

def prioritize_tasks(tasks: List[ScheduleTask]) -> List[ScheduleTask]:
    """Dependency pre-order, then a stable priority / focus / duration sort."""
    return sort_by_priority(order_by_dependencies(tasks))

# ================================
# ASSIGNMENT
# ================================

def assign_tasks(slots: List[TimeSlot], tasks: List[ScheduleTask]) -> List[ScheduledAssignment]:
    """
    Place each task, in the given order, at the first slot that has room,
    matches its focus requirement and has one of its contexts open.

    consumed[i] holds the minutes already packed into slots[i]; a slot keeps
    accepting tasks until its capacity runs out. Tasks that fit nowhere are
    left out of the result.
    """
    consumed = [0] * len(slots)
    assignments: List[ScheduledAssignment] = []

    for task in tasks:
        duration = task.duration_minutes
        placed = False
        for index, slot in enumerate(slots):
            free_from = slot_cursor(slot, consumed[index])
            remaining = remaining_minutes(slot, consumed[index])
            if not is_slot_allowed(task, slot, free_from, remaining):
                continue

            assignments.append(ScheduledAssignment(task_id=task.id, planned_date=free_from, estimated=duration))
            consumed[index] += duration
            placed = True
            logger.debug(f"Task {task.id} '{task.title}' placed at {free_from:%H:%M} for {duration} min")
            break

        if not placed:
            logger.debug(f"Task {task.id} '{task.title}' could not be placed")

    return assignments


def schedule_tasks(config: TimeConfiguration, tasks: List[ScheduleTask], target_date: date,
                   filter_candidates: bool = True) -> List[ScheduledAssignment]:
    """Run a full scheduling pass for one day."""
    candidates = select_candidates(tasks, target_date) if filter_candidates else list(tasks)
    slots = generate_slots(config, target_date)
    assignments = assign_tasks(slots, prioritize_tasks(candidates))
    logger.info(
        f"Scheduled {len(assignments)} of {len(candidates)} candidate tasks on {target_date} "
        f"across {len(slots)} slots"
    )
    return assignments

# ================================
# SCHEDULER FACADE
# ================================

class SmartScheduler:
    """
    Convenience wrapper binding one TimeConfiguration to the scheduling
    functions above. Holds no state between runs.
    """
    def __init__(self, config: Optional[TimeConfiguration] = None):
        self.config = config or TimeConfiguration()

    def generate_slots(self, target_date: date) -> List[TimeSlot]:
        return generate_slots(self.config, target_date)

    def prioritize_tasks(self, tasks: List[ScheduleTask]) -> List[ScheduleTask]:
        return prioritize_tasks(tasks)

    def schedule_tasks(self, tasks: List[ScheduleTask], target_date: date,
                       filter_candidates: bool = True) -> List[ScheduledAssignment]:
        return schedule_tasks(self.config, tasks, target_date, filter_candidates=filter_candidates)

    def __repr__(self):
        c = self.config
        return (f"SmartScheduler({c.work_start_time}-{c.work_end_time}, "
                f"pomodoro {c.pomodoro_duration}m x{c.short_break_interval})")
