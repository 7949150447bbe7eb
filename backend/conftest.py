"""
Pytest configuration and fixtures for testing.

Tests run against an in-memory SQLite database instead of the configured
DATABASE_URL:
- Fresh database (tables from Base.metadata) for every test function
- StaticPool so every session sees the same in-memory connection
- The app's get_db dependency is overridden to use the test database
- Production/local database files are never touched
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from db.session import get_db
from main import app
from models import Base


@pytest.fixture(scope="function")
def test_engine():
    """
    Create an in-memory SQLite engine with the workers schema.

    - Runs once per test function (complete isolation)
    - Tables are created from the ORM models, not Alembic
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)

    yield engine

    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope="function")
def test_db(test_engine):
    """
    Create a database session for service-layer tests.

    Usage:
        def test_create_worker(test_db):
            from db.worker_service import create_worker

            worker = create_worker(test_db, {"name": "Ana"})
            assert worker.id is not None
    """
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    db = TestSessionLocal()

    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="function")
def client(test_engine):
    """Create test client with get_db overridden to the test database."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

    def override_get_db():
        db = TestSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
