# tests/conftest.py
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from pathlib import Path
import shutil
import tempfile
import os

from projectplan.main import app
from projectplan.database import Base, get_db
from projectplan.config import settings
from projectplan.schemas import ProjectCreate, TodoCreate
from projectplan.services.catalog import CatalogStore
from projectplan.utils import timestamps

SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

@pytest.fixture(scope="session")
def engine():
    """Create test database engine"""
    engine = create_engine(
        SQLALCHEMY_TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool  # Needed for SQLite in-memory database
    )
    return engine

@pytest.fixture(scope="session")
def tables(engine):
    """Create all tables in the test database"""
    Base.metadata.create_all(engine)
    yield
    Base.metadata.drop_all(engine)

@pytest.fixture
def db_session(engine, tables):
    """Creates a new database session for a test"""
    connection = engine.connect()
    transaction = connection.begin()
    session = sessionmaker(bind=connection)()

    yield session

    session.close()
    transaction.rollback()
    connection.close()

@pytest.fixture(scope="session")
def temp_storage_dir():
    """Create temporary storage directory for test files"""
    temp_dir = tempfile.mkdtemp()
    Path(temp_dir, "logs").mkdir(parents=True, exist_ok=True)
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)

@pytest.fixture(autouse=True)
def override_settings(temp_storage_dir):
    """Override settings for testing"""
    original_storage = settings.STORAGE_PATH
    original_logs = settings.LOGS_PATH
    original_enforce = settings.ENFORCE_PROJECT_ON_TODO_CREATE

    settings.STORAGE_PATH = temp_storage_dir
    settings.LOGS_PATH = temp_storage_dir / "logs"
    settings.ENFORCE_PROJECT_ON_TODO_CREATE = True

    yield

    settings.STORAGE_PATH = original_storage
    settings.LOGS_PATH = original_logs
    settings.ENFORCE_PROJECT_ON_TODO_CREATE = original_enforce

@pytest.fixture
def client(db_session):
    """Test client using the test database"""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()

@pytest.fixture
def clock(monkeypatch):
    """Deterministic timestamps: each call returns the next second"""
    class Clock:
        def __init__(self):
            self.tick = 0

        def __call__(self):
            self.tick += 1
            return f"2024-01-01T00:00:{self.tick:02d}.000Z"

    fake = Clock()
    monkeypatch.setattr(timestamps, "utc_now", fake)
    return fake

@pytest.fixture
def catalog(db_session):
    return CatalogStore(db_session)

@pytest.fixture
def sample_project(catalog):
    """Create a sample project"""
    return catalog.create_project(ProjectCreate(name="Test Project", description="Test Description"))

@pytest.fixture
def sample_todo(catalog, sample_project):
    """Create a sample todo in the sample project"""
    return catalog.create_todo(TodoCreate(
        project_id=sample_project.id,
        name="Test Todo",
        description="Test Description",
        status="pending",
        progress="low"
    ))

@pytest.fixture(scope="session", autouse=True)
def cleanup_test_files():
    """Clean up test files after all tests are done"""
    yield
    for file in ["projectplan.db", "test-projectplan.db"]:
        if os.path.exists(file):
            os.remove(file)
