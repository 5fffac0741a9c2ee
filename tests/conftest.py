"""Shared test fixtures."""

import os

# Keep the module-level engine off the working directory
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from life_manage.db.config import enable_sqlite_foreign_keys, get_session
from life_manage.db.init import init_db
from life_manage.main import app
from life_manage.services.gateway import PersistenceGateway
from life_manage.session import session_store


@pytest.fixture
def engine():
    """Fresh in-memory database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def gateway(session):
    return PersistenceGateway(session)


@pytest.fixture(autouse=True)
def clear_session_store():
    session_store.clear()
    yield
    session_store.clear()


@pytest.fixture
def client(engine):
    """TestClient whose requests use the in-memory database."""

    def override_get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()
