"""
Pytest fixtures: an in-memory SQLite database and a temporary dashboards directory,
both bound into the FastAPI app through dependency overrides.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import api.models  # noqa: F401 - register tables on Base
from api.db import Base, get_db
from api.main import app
from api.models.statistics import Statistic
from api.routers import files
from api.services.file_dashboard_service import FileDashboardStore
from api.services.setting_service import DatabaseDashboardStore


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
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
def esd(db):
    """The ESD1 statistics record most tests reference."""
    record = Statistic(esd_name="ESD1", data={"period": "2024-01", "count": 42})
    db.add(record)
    db.commit()
    return record


@pytest.fixture
def setting_store(db):
    return DatabaseDashboardStore(db)


@pytest.fixture
def dashboards_dir(tmp_path):
    return tmp_path / "dashboards"


@pytest.fixture
def file_store(dashboards_dir):
    return FileDashboardStore(dashboards_dir)


@pytest.fixture
def client(session_factory, dashboards_dir):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[files.get_file_store] = lambda: FileDashboardStore(dashboards_dir)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
