import os
from datetime import datetime, timezone
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("APP_ENV", "test")

from fitness_tracker.config import Settings
from fitness_tracker.database import Base, StorageEngine
from fitness_tracker.repositories.workout_repository import WorkoutRepository

FIXED_NOW = datetime(2024, 3, 15, 18, 30, tzinfo=timezone.utc)


def _sqlite_url(path: Path) -> str:
    return f"sqlite:///{path}"


@pytest.fixture()
def storage(tmp_path: Path):
    engine = StorageEngine(_sqlite_url(tmp_path / "fitness.db"))
    engine.initialize()
    yield engine
    engine.dispose()


@pytest.fixture()
def repository(storage: StorageEngine) -> WorkoutRepository:
    return WorkoutRepository(storage)


@pytest.fixture(scope="session")
def api_settings(tmp_path_factory) -> Settings:
    db_path = tmp_path_factory.mktemp("api_db") / "test_fitness.db"
    return Settings(
        FITNESS_DATABASE_URL=_sqlite_url(db_path),
        OPENAI_API_KEY=None,
        METRICS_ENABLED=True,
    )


@pytest.fixture(scope="session")
def app(api_settings: Settings):
    from fitness_tracker.main import create_app

    return create_app(api_settings)


@pytest.fixture(scope="session")
def session_client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def client(app, session_client: TestClient):
    """API client; tables are emptied after each test."""
    yield session_client

    storage = app.state.storage
    with storage.engine.connect() as connection:
        transaction = connection.begin()
        for table in reversed(Base.metadata.sorted_tables):
            connection.execute(table.delete())
        transaction.commit()


@pytest.fixture()
def fixed_now() -> datetime:
    return FIXED_NOW
