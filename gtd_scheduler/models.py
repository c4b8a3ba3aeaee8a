from sqlalchemy import (
    String, Integer, Boolean, Enum, ForeignKey, DateTime, Table, Column, UniqueConstraint
)
from sqlalchemy.orm import Mapped, mapped_column, relationship
from datetime import datetime
from typing import Optional, List
from .database import Base
from .scheduling.core.task import PriorityLevel, ItemStatus
from .scheduling.core import config as defaults

# Association table for many-to-many items ↔ contexts
item_contexts = Table(
    "item_contexts",
    Base.metadata,
    Column("item_id", Integer, ForeignKey("items.id"), primary_key=True),
    Column("context_id", Integer, ForeignKey("contexts.id"), primary_key=True),
)

# Models

class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    email: Mapped[str] = mapped_column(String, unique=True, index=True)
    name: Mapped[Optional[str]] = mapped_column(String, nullable=True)

    # Working-day preferences ("HH:MM" strings, durations in minutes)
    work_start_time: Mapped[str] = mapped_column(String, default=defaults.DEFAULT_WORK_START)
    work_end_time: Mapped[str] = mapped_column(String, default=defaults.DEFAULT_WORK_END)
    lunch_start_time: Mapped[str] = mapped_column(String, default=defaults.DEFAULT_LUNCH_START)
    lunch_duration: Mapped[int] = mapped_column(Integer, default=defaults.DEFAULT_LUNCH_DURATION)
    break_duration: Mapped[int] = mapped_column(Integer, default=defaults.DEFAULT_BREAK_DURATION)
    long_break_duration: Mapped[int] = mapped_column(Integer, default=defaults.DEFAULT_LONG_BREAK_DURATION)
    pomodoro_duration: Mapped[int] = mapped_column(Integer, default=defaults.DEFAULT_POMODORO_DURATION)
    short_break_interval: Mapped[int] = mapped_column(Integer, default=defaults.DEFAULT_SHORT_BREAK_INTERVAL)

    # Relationships
    items = relationship("Item", back_populates="user")
    contexts = relationship("Context", back_populates="user")


class Context(Base):
    __tablename__ = "contexts"
    __table_args__ = (UniqueConstraint("user_id", "name", name="uq_context_user_name"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)
    name: Mapped[str] = mapped_column(String)
    description: Mapped[Optional[str]] = mapped_column(String, nullable=True)

    monday_enabled: Mapped[bool] = mapped_column(Boolean, default=False)
    tuesday_enabled: Mapped[bool] = mapped_column(Boolean, default=False)
    wednesday_enabled: Mapped[bool] = mapped_column(Boolean, default=False)
    thursday_enabled: Mapped[bool] = mapped_column(Boolean, default=False)
    friday_enabled: Mapped[bool] = mapped_column(Boolean, default=False)
    saturday_enabled: Mapped[bool] = mapped_column(Boolean, default=False)
    sunday_enabled: Mapped[bool] = mapped_column(Boolean, default=False)
    start_time: Mapped[str] = mapped_column(String, default="09:00")
    end_time: Mapped[str] = mapped_column(String, default="17:00")

    user = relationship("User", back_populates="contexts")
    items = relationship("Item", secondary=item_contexts, back_populates="contexts")


class Item(Base):
    __tablename__ = "items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)
    title: Mapped[str] = mapped_column(String)
    status: Mapped[ItemStatus] = mapped_column(Enum(ItemStatus), default=ItemStatus.INBOX)
    priority: Mapped[PriorityLevel] = mapped_column(Enum(PriorityLevel), default=PriorityLevel.MEDIUM)
    estimated: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)  # minutes
    requires_focus: Mapped[bool] = mapped_column(Boolean, default=False)
    due_date: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    planned_date: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = relationship("User", back_populates="items")
    contexts: Mapped[List["Context"]] = relationship("Context", secondary=item_contexts, back_populates="items")
    depends_on = relationship(
        "TaskDependency", foreign_keys="TaskDependency.dependent_task_id", back_populates="dependent_task",
        cascade="all, delete-orphan"
    )
    blocks = relationship(
        "TaskDependency", foreign_keys="TaskDependency.blocker_task_id", back_populates="blocker_task",
        cascade="all, delete-orphan"
    )


class TaskDependency(Base):
    """blocker_task must be done before dependent_task."""
    __tablename__ = "task_dependencies"
    __table_args__ = (UniqueConstraint("blocker_task_id", "dependent_task_id", name="uq_task_dependency"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    blocker_task_id: Mapped[int] = mapped_column(ForeignKey("items.id"))
    dependent_task_id: Mapped[int] = mapped_column(ForeignKey("items.id"))

    blocker_task = relationship("Item", foreign_keys=[blocker_task_id], back_populates="blocks")
    dependent_task = relationship("Item", foreign_keys=[dependent_task_id], back_populates="depends_on")
