from pydantic import BaseModel, Field
from datetime import datetime
from typing import List

# ----------------- Preference Schemas ---------------------

class TimeConfigurationIn(BaseModel):
    work_start_time: str = Field("09:00", description="HH:MM")
    work_end_time: str = Field("17:00", description="HH:MM")
    lunch_start_time: str = Field("12:00", description="HH:MM")
    lunch_duration: int = 60
    break_duration: int = 15
    long_break_duration: int = 30
    pomodoro_duration: int = 25
    short_break_interval: int = 3

class TimeConfigurationOut(TimeConfigurationIn):
    user_id: int

    class Config:
        from_attributes = True

# ----------------- Schedule Schemas ---------------------

class ScheduledAssignmentOut(BaseModel):
    task_id: int
    planned_date: datetime
    estimated: int

    class Config:
        from_attributes = True

class ScheduleResponse(BaseModel):
    date: str
    persisted: bool
    assignments: List[ScheduledAssignmentOut]

class SlotOut(BaseModel):
    start: datetime
    end: datetime
    is_focus_time: bool
    is_break: bool

    class Config:
        from_attributes = True

class SlotsResponse(BaseModel):
    date: str
    slots: List[SlotOut]

