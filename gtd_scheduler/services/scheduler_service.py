"""
Bridges the database and the scheduling core: loads a user's preferences and
candidate items, runs the scheduler, and optionally writes the result back.
"""

import logging
from datetime import date, datetime, time
from typing import List
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload
from ..models import User, Item, Context
from ..scheduling import (
    SmartScheduler, TimeConfiguration, ScheduleTask, ScheduleContext, ScheduledAssignment, TimeSlot
)
from ..scheduling.core.task import ACTIONABLE_STATUSES

logger = logging.getLogger(__name__)


class UserNotFoundError(Exception):
    """Raised when a scheduling request names a user that does not exist."""


def get_user(db: Session, user_id: int) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise UserNotFoundError(f"User {user_id} not found")
    return user


def build_scheduler(user: User) -> SmartScheduler:
    return SmartScheduler(TimeConfiguration.from_preferences(user))


def to_schedule_context(context: Context) -> ScheduleContext:
    return ScheduleContext(
        id=context.id,
        name=context.name,
        monday_enabled=context.monday_enabled,
        tuesday_enabled=context.tuesday_enabled,
        wednesday_enabled=context.wednesday_enabled,
        thursday_enabled=context.thursday_enabled,
        friday_enabled=context.friday_enabled,
        saturday_enabled=context.saturday_enabled,
        sunday_enabled=context.sunday_enabled,
        start_time=context.start_time,
        end_time=context.end_time,
    )


def to_schedule_task(item: Item) -> ScheduleTask:
    return ScheduleTask(
        id=item.id,
        title=item.title,
        priority=item.priority,
        estimated=item.estimated,
        requires_focus=item.requires_focus,
        contexts=[to_schedule_context(c) for c in item.contexts],
        depends_on=[d.blocker_task_id for d in item.depends_on],
        status=item.status,
        planned_date=item.planned_date,
        due_date=item.due_date,
    )


def load_candidate_tasks(db: Session, user_id: int, target_date: date) -> List[ScheduleTask]:
    """Actionable, unplanned items of the user due on or after target_date."""
    day_start = datetime.combine(target_date, time.min)
    items = (
        db.query(Item)
        .options(selectinload(Item.contexts), selectinload(Item.depends_on))
        .filter(
            Item.user_id == user_id,
            Item.status.in_(ACTIONABLE_STATUSES),
            Item.planned_date.is_(None),
            Item.due_date >= day_start,
        )
        .order_by(Item.id)
        .all()
    )
    return [to_schedule_task(item) for item in items]


def get_day_slots(db: Session, user_id: int, target_date: date) -> List[TimeSlot]:
    user = get_user(db, user_id)
    return build_scheduler(user).generate_slots(target_date)


def get_schedule_preview(db: Session, user_id: int, target_date: date) -> List[ScheduledAssignment]:
    """Compute a day's assignments without writing anything."""
    user = get_user(db, user_id)
    scheduler = build_scheduler(user)
    tasks = load_candidate_tasks(db, user_id, target_date)
    return scheduler.schedule_tasks(tasks, target_date)


def schedule_unplanned_tasks(db: Session, user_id: int, target_date: date) -> List[ScheduledAssignment]:
    """
    Compute a day's assignments and write planned_date/estimated back onto the
    items in one transaction.
    """
    assignments = get_schedule_preview(db, user_id, target_date)
    if not assignments:
        logger.info(f"No tasks scheduled for user {user_id} on {target_date}")
        return assignments

    try:
        items = {
            item.id: item
            for item in db.query(Item).filter(Item.id.in_([a.task_id for a in assignments])).all()
        }
        for assignment in assignments:
            item = items[assignment.task_id]
            item.planned_date = assignment.planned_date
            item.estimated = assignment.estimated
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error persisting schedule for user {user_id} on {target_date}: {e}")
        raise

    logger.info(f"Persisted {len(assignments)} scheduled tasks for user {user_id} on {target_date}")
    return assignments
