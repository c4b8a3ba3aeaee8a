"""
Schedule API endpoints
"""

from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas import ScheduleResponse, ScheduledAssignmentOut, SlotsResponse, SlotOut
from ..scheduling import ConfigurationError
from ..services.scheduler_service import (
    UserNotFoundError, get_day_slots, get_schedule_preview, schedule_unplanned_tasks
)

router = APIRouter()


def parse_target_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid date format, expected YYYY-MM-DD")


def _run(action, db: Session, user_id: int, target_date: date):
    try:
        return action(db, user_id, target_date)
    except UserNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ConfigurationError as e:
        raise HTTPException(status_code=422, detail=f"Invalid time configuration: {e}")


@router.post("/{user_id}/auto", response_model=ScheduleResponse)
def auto_schedule(
    user_id: int,
    db: Session = Depends(get_db),
    target: str = Query(..., alias="date", description="Day to schedule (YYYY-MM-DD)"),
):
    """
    Schedule the user's unplanned actionable tasks into the given day and
    save the planned times.
    """
    target_date = parse_target_date(target)
    assignments = _run(schedule_unplanned_tasks, db, user_id, target_date)
    return ScheduleResponse(
        date=target_date.isoformat(),
        persisted=True,
        assignments=[ScheduledAssignmentOut.model_validate(a) for a in assignments],
    )


@router.get("/{user_id}/preview", response_model=ScheduleResponse)
def preview_schedule(
    user_id: int,
    db: Session = Depends(get_db),
    target: str = Query(..., alias="date", description="Day to preview (YYYY-MM-DD)"),
):
    """Same as /auto but nothing is written"""
    target_date = parse_target_date(target)
    assignments = _run(get_schedule_preview, db, user_id, target_date)
    return ScheduleResponse(
        date=target_date.isoformat(),
        persisted=False,
        assignments=[ScheduledAssignmentOut.model_validate(a) for a in assignments],
    )


@router.get("/{user_id}/slots", response_model=SlotsResponse)
def day_slots(
    user_id: int,
    db: Session = Depends(get_db),
    target: str = Query(..., alias="date", description="Day to lay out (YYYY-MM-DD)"),
):
    target_date = parse_target_date(target)
    slots = _run(get_day_slots, db, user_id, target_date)
    return SlotsResponse(
        date=target_date.isoformat(),
        slots=[SlotOut.model_validate(s) for s in slots],
    )
