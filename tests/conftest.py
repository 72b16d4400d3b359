# tests/conftest.py

from __future__ import annotations

import os

# Point the application engine at SQLite before task_manager is imported.
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel

from task_manager.database import _create_engine, get_db
from task_manager.main import app
from task_manager.services.task_service import TaskService


@pytest.fixture()
def engine():
    """Fresh in-memory database per test."""
    engine = _create_engine("sqlite://")
    SQLModel.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def db(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def service(db) -> TaskService:
    return TaskService(db)


@pytest.fixture()
def client(engine):
    """TestClient whose requests use the per-test database."""
    SessionTesting = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        session = SessionTesting()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
