import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from gtd_scheduler.database import Base, get_db
from gtd_scheduler.main import app
from gtd_scheduler.models import User, Context, Item
from gtd_scheduler.scheduling import ItemStatus, PriorityLevel


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def seeded_user(db_session):
    """User with default preferences, one weekday office context and three items."""
    user = User(email="planner@example.com", name="Planner")
    db_session.add(user)
    db_session.flush()

    office = Context(
        user_id=user.id,
        name="Office",
        monday_enabled=True,
        tuesday_enabled=True,
        wednesday_enabled=True,
        thursday_enabled=True,
        friday_enabled=True,
        start_time="09:00",
        end_time="17:00",
    )
    db_session.add(office)

    write_report = Item(
        user_id=user.id,
        title="Write report",
        status=ItemStatus.NEXT_ACTION,
        priority=PriorityLevel.URGENT,
        estimated=25,
        requires_focus=True,
        due_date=datetime(2025, 1, 10),
        contexts=[office],
    )
    reply_emails = Item(
        user_id=user.id,
        title="Reply to emails",
        status=ItemStatus.NEXT_ACTION,
        priority=PriorityLevel.LOW,
        estimated=10,
        requires_focus=False,
        due_date=datetime(2025, 1, 10),
        contexts=[office],
    )
    inbox_item = Item(
        user_id=user.id,
        title="Unclarified note",
        status=ItemStatus.INBOX,
        priority=PriorityLevel.HIGH,
        estimated=10,
        due_date=datetime(2025, 1, 10),
        contexts=[office],
    )
    db_session.add_all([write_report, reply_emails, inbox_item])
    db_session.commit()
    return user
