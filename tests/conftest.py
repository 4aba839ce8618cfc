"""Shared fixtures: in-memory SQLite session and record store."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Must be set before app.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SHIFT_MODE", "split")
os.environ.setdefault("API_KEY", "")

from datetime import date

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import create_tables
from app.models.operational_report import OperationalReport
from app.models.vehicle import Vehicle
from app.services.record_store import SqlRecordStore


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def store(db):
    return SqlRecordStore(db)


@pytest.fixture
def seed(db):
    """Insert vehicles/reports: seed(vehicles=[...], reports=[...])."""
    def _seed(vehicles=(), reports=()):
        for v in vehicles:
            db.add(Vehicle(**{"total_trips": 0, "online": True, **v}))
        for r in reports:
            db.add(OperationalReport(**{"approval_state": "approved", **r}))
        db.commit()
    return _seed


@pytest.fixture
def v1_row():
    return {"vehicle_number": "V1", "fleet_name": "North Fleet",
            "online": True, "first_operational_date": date(2024, 1, 10)}
