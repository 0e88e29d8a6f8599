"""
Pytest configuration and shared fixtures.

Every test gets a fresh in-memory SQLite database.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from chelto import models  # noqa: F401
from chelto.core import config
from chelto.core.database import Base, get_db
from chelto.main import app
from chelto.services.record_store import RecordStore


@pytest.fixture
def db():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def store(db):
    return RecordStore(db)


@pytest.fixture
def client(db, monkeypatch):
    monkeypatch.setattr(config, "REGISTRATION_RATE_LIMIT", 100)
    monkeypatch.setattr("chelto.api.registrations.notify_monitor", lambda message: False)

    def _override_get_db():
        yield db

    app.dependency_overrides[get_db] = _override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def asha():
    return {
        "name": "Asha",
        "email": "asha@x.com",
        "phone_number": "9990001111",
        "city": "Guntur",
    }
