from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from ..database import get_db
from ..models import User
from ..schemas import TimeConfigurationIn, TimeConfigurationOut
from ..scheduling import TimeConfiguration, ConfigurationError

router = APIRouter(tags=["user-preferences"])

PREFERENCE_FIELDS = (
    "work_start_time",
    "work_end_time",
    "lunch_start_time",
    "lunch_duration",
    "break_duration",
    "long_break_duration",
    "pomodoro_duration",
    "short_break_interval",
)


def _preferences_out(user: User) -> TimeConfigurationOut:
    return TimeConfigurationOut(user_id=user.id, **{name: getattr(user, name) for name in PREFERENCE_FIELDS})


def _get_user_or_404(db: Session, user_id: int) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(status_code=404, detail=f"User {user_id} not found")
    return user


@router.get("/{user_id}/preferences", response_model=TimeConfigurationOut)
def get_user_preferences(user_id: int, db: Session = Depends(get_db)):
    return _preferences_out(_get_user_or_404(db, user_id))


@router.put("/{user_id}/preferences", response_model=TimeConfigurationOut)
def set_user_preferences(user_id: int, data: TimeConfigurationIn, db: Session = Depends(get_db)):
    """Replace the user's working-day configuration after validating it."""
    user = _get_user_or_404(db, user_id)
    try:
        config = TimeConfiguration(**data.model_dump())
    except ConfigurationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    for name in PREFERENCE_FIELDS:
        setattr(user, name, getattr(config, name))
    db.commit()
    db.refresh(user)
    return _preferences_out(user)
