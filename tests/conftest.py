"""Shared fixtures: in-memory database and a frozen clock."""

import os

# Must be set before core.db is imported anywhere
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.pop("YEAR_VIEW_SPAN", None)

from datetime import date

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.db import Base
from models.user import User
from models.food_item import FoodItem
from models.order import Order, OrderItem
from models.audit_log import AuditLog

TODAY = date(2024, 6, 15)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def clock():
    return lambda: TODAY


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False, future=True)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


class RangeRecorder:
    """Collects on_change calls from a DateRangePicker."""

    def __init__(self):
        self.calls = []

    def __call__(self, value):
        self.calls.append(value)


@pytest.fixture
def recorder():
    return RangeRecorder()
