import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import app.main as main_module
from app.core.database import Base
from app.dependencies import get_db
from app.main import app


class StubSession:
    """Stands in for a SQLAlchemy session; repository calls are monkeypatched."""


@pytest.fixture
def db_session():
    return StubSession()


@pytest.fixture
def startup_checks(monkeypatch):
    calls = []
    monkeypatch.setattr(main_module, "verify_database_connection", lambda: calls.append("db"))
    return calls


@pytest.fixture
def client(db_session, startup_checks):
    app.dependency_overrides[get_db] = lambda: db_session
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sqlite_session():
    """In-memory database with the ``public`` schema mapped onto SQLite's default one."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        execution_options={"schema_translate_map": {"public": None}},
    )
    Base.metadata.create_all(engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()
