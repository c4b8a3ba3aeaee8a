from datetime import date, datetime, time

from gtd_scheduler.models import TaskDependency
from gtd_scheduler.scheduling import ScheduleContext, ScheduleTask, TimeConfiguration

MONDAY = date(2025, 1, 6)
TUESDAY = date(2025, 1, 7)


def at(hour: int, minute: int = 0, day: date = MONDAY) -> datetime:
    return datetime.combine(day, time(hour, minute))


def every_day_context(start: str = "09:00", end: str = "17:00", **overrides) -> ScheduleContext:
    fields = dict(
        id=1,
        name="Anywhere",
        monday_enabled=True,
        tuesday_enabled=True,
        wednesday_enabled=True,
        thursday_enabled=True,
        friday_enabled=True,
        saturday_enabled=True,
        sunday_enabled=True,
        start_time=start,
        end_time=end,
    )
    fields.update(overrides)
    return ScheduleContext(**fields)


def make_task(task_id, priority="MEDIUM", estimated=None, requires_focus=False, contexts=None, **kwargs) -> ScheduleTask:
    return ScheduleTask(
        id=task_id,
        title=f"Task {task_id}",
        priority=priority,
        estimated=estimated,
        requires_focus=requires_focus,
        contexts=[every_day_context()] if contexts is None else contexts,
        due_date=datetime(2025, 1, 31),
        **kwargs,
    )


def morning_config() -> TimeConfiguration:
    """09:00-12:00 day with 25/5/15 pomodoro cadence, three focus slots per cycle."""
    return TimeConfiguration(
        work_start_time="09:00",
        work_end_time="12:00",
        lunch_start_time="12:00",
        lunch_duration=60,
        pomodoro_duration=25,
        break_duration=5,
        long_break_duration=15,
        short_break_interval=3,
    )


def add_dependency(db_session, blocker, dependent):
    db_session.add(TaskDependency(blocker_task_id=blocker.id, dependent_task_id=dependent.id))
    db_session.commit()
