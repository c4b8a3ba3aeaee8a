"""
Task auto-scheduling core.

Builds a day's focus/break slots from a user's working-day configuration and
packs prioritized tasks into them. Pure in-memory code; persistence lives in
gtd_scheduler.services.
"""

from .core.config import TimeConfiguration, ConfigurationError
from .core.time_slot import TimeSlot
from .core.task import (
    PriorityLevel, ItemStatus, ScheduleContext, ScheduleTask, ScheduledAssignment, select_candidates
)
from .core.scheduler import SmartScheduler, generate_slots, prioritize_tasks, assign_tasks, schedule_tasks

__version__ = "1.0.0"
