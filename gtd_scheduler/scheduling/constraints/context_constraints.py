"""
Constraint checking for placing a task at a slot's free instant.
"""

import logging
from datetime import datetime
from ..core.task import ScheduleContext, ScheduleTask
from ..core.time_slot import TimeSlot
from ..utils.slot_utils import parse_hhmm, minutes_of_day

logger = logging.getLogger(__name__)


def is_context_available(context: ScheduleContext, moment: datetime) -> bool:
    """
    A context is available at a moment iff its weekday flag is enabled and the
    moment's time of day lies within [start_time, end_time], both ends inclusive.
    A window that is not valid HH:MM never matches.
    """
    if not context.is_day_enabled(moment.weekday()):
        return False

    current = minutes_of_day(moment)
    try:
        window_start = minutes_of_day(parse_hhmm(context.start_time))
        window_end = minutes_of_day(parse_hhmm(context.end_time))
    except ValueError as e:
        logger.warning(f"Context {context.id} '{context.name}' treated as unavailable: {e}")
        return False
    return window_start <= current <= window_end


def has_available_context(task: ScheduleTask, moment: datetime) -> bool:
    """Any one of the task's contexts suffices. A task without contexts never matches."""
    return any(is_context_available(context, moment) for context in task.contexts)


def is_slot_allowed(task: ScheduleTask, slot: TimeSlot, free_from: datetime, remaining: int) -> bool:
    """
    Check whether a task can start at free_from inside slot, given remaining
    minutes of capacity.
    """
    # Rule 1: capacity
    if remaining < task.duration_minutes:
        logger.debug(f"Slot {slot!r} rejected for task {task.id}: {remaining} min left, needs {task.duration_minutes}")
        return False

    # Rule 2: focus work only goes into focus slots; flexible work may use either
    if task.requires_focus and not slot.is_focus_time:
        logger.debug(f"Slot {slot!r} rejected for task {task.id}: task requires focus")
        return False

    # Rule 3: at least one context open at the start instant
    if not has_available_context(task, free_from):
        logger.debug(f"Slot {slot!r} rejected for task {task.id}: no context available at {free_from:%a %H:%M}")
        return False

    return True
