from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

from academy_api.app.core.config import settings
from academy_api.app.core.db import init_db
from academy_api.app.main import app
from academy_api.app.repositories.course_repository import CourseRepository
from academy_api.app.repositories.trainer_repository import TrainerRepository


@pytest.fixture
def database(tmp_path, monkeypatch):
    """Point the application at a fresh SQLite file with the schema applied."""
    db_file = tmp_path / "academy_test.db"
    monkeypatch.setattr(settings, "database_url", str(db_file))
    init_db()
    return db_file


@pytest.fixture
def client(database):
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def trainer_repository(database):
    return TrainerRepository()


@pytest.fixture
def course_repository(database):
    return CourseRepository()


@pytest.fixture
def future_date():
    return date.today() + timedelta(days=5)
