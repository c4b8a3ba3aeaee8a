"""Tests for services/scheduler_service.py against an in-memory database."""

from datetime import datetime

import pytest

from gtd_scheduler.models import Item
from gtd_scheduler.scheduling import ItemStatus, PriorityLevel
from gtd_scheduler.services.scheduler_service import (
    UserNotFoundError, get_day_slots, get_schedule_preview, load_candidate_tasks, schedule_unplanned_tasks
)
from tests.helpers import MONDAY, add_dependency, at


def _item(db_session, title):
    return db_session.query(Item).filter(Item.title == title).one()


def test_load_candidate_tasks_filters_non_actionable_items(db_session, seeded_user):
    tasks = load_candidate_tasks(db_session, seeded_user.id, MONDAY)
    assert sorted(t.title for t in tasks) == ["Reply to emails", "Write report"]
    report = next(t for t in tasks if t.title == "Write report")
    assert report.priority is PriorityLevel.URGENT
    assert report.requires_focus
    assert report.contexts[0].name == "Office"
    assert report.contexts[0].monday_enabled


def test_load_candidate_tasks_excludes_items_due_before_the_day(db_session, seeded_user):
    overdue = Item(
        user_id=seeded_user.id, title="Overdue", status=ItemStatus.NEXT_ACTION,
        due_date=datetime(2025, 1, 3), contexts=list(_item(db_session, "Write report").contexts),
    )
    db_session.add(overdue)
    db_session.commit()
    titles = [t.title for t in load_candidate_tasks(db_session, seeded_user.id, MONDAY)]
    assert "Overdue" not in titles


def test_preview_does_not_write(db_session, seeded_user):
    assignments = get_schedule_preview(db_session, seeded_user.id, MONDAY)
    assert len(assignments) == 2
    assert _item(db_session, "Write report").planned_date is None


def test_schedule_unplanned_tasks_persists_assignments(db_session, seeded_user):
    assignments = schedule_unplanned_tasks(db_session, seeded_user.id, MONDAY)
    assert len(assignments) == 2

    report = _item(db_session, "Write report")
    emails = _item(db_session, "Reply to emails")
    assert report.planned_date == at(9)
    assert report.estimated == 25
    assert emails.planned_date == at(9, 25)
    assert emails.estimated == 10
    assert _item(db_session, "Unclarified note").planned_date is None

    # planned items are no longer candidates
    assert schedule_unplanned_tasks(db_session, seeded_user.id, MONDAY) == []


def test_missing_estimate_is_written_back_as_default(db_session, seeded_user):
    office = _item(db_session, "Write report").contexts[0]
    db_session.add(Item(
        user_id=seeded_user.id, title="Unsized", status=ItemStatus.PROJECT,
        priority=PriorityLevel.LOW, due_date=datetime(2025, 1, 6, 18), contexts=[office],
    ))
    db_session.commit()
    schedule_unplanned_tasks(db_session, seeded_user.id, MONDAY)
    assert _item(db_session, "Unsized").estimated == 30


def test_dependencies_are_loaded_and_order_equal_tasks(db_session, seeded_user):
    office = _item(db_session, "Write report").contexts[0]
    follow_up = Item(user_id=seeded_user.id, title="Follow up", status=ItemStatus.NEXT_ACTION,
                     priority=PriorityLevel.MEDIUM, estimated=5, due_date=datetime(2025, 1, 10), contexts=[office])
    prepare = Item(user_id=seeded_user.id, title="Prepare", status=ItemStatus.NEXT_ACTION,
                   priority=PriorityLevel.MEDIUM, estimated=5, due_date=datetime(2025, 1, 10), contexts=[office])
    db_session.add_all([follow_up, prepare])
    db_session.commit()
    add_dependency(db_session, blocker=prepare, dependent=follow_up)

    tasks = {t.title: t for t in load_candidate_tasks(db_session, seeded_user.id, MONDAY)}
    assert tasks["Follow up"].depends_on == [prepare.id]

    placed = {a.task_id: a.planned_date for a in get_schedule_preview(db_session, seeded_user.id, MONDAY)}
    assert placed[prepare.id] < placed[follow_up.id]


def test_day_slots_follow_user_preferences(db_session, seeded_user):
    seeded_user.work_end_time = "12:00"
    seeded_user.break_duration = 5
    seeded_user.long_break_duration = 15
    db_session.commit()
    slots = get_day_slots(db_session, seeded_user.id, MONDAY)
    assert len(slots) == 8
    assert slots[-1].end == at(12)


def test_unknown_user_raises(db_session):
    with pytest.raises(UserNotFoundError):
        get_schedule_preview(db_session, 999, MONDAY)
