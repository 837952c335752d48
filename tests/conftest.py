"""Pytest configuration and fixtures."""

import os
import sys

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Add the app directory to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Set test environment variables before importing app modules
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test.db")
os.environ["ENVIRONMENT"] = "test"
os.environ.setdefault("LOG_LEVEL", "INFO")


@pytest.fixture
def test_settings(tmp_path):
    """Settings pointing at a throwaway SQLite database."""
    from app.core.config import Settings

    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        environment="test",
    )


@pytest_asyncio.fixture
async def database(test_settings):
    """Database with all tables created."""
    from app.core.storage import Database

    db = Database(test_settings)
    await db.init_models()
    yield db
    await db.dispose()


@pytest.fixture
def application_service(database):
    """Application service with the default, unrestricted workflow."""
    from app.services.application_service import ApplicationService

    return ApplicationService(database.session_factory)


@pytest.fixture
def strict_application_service(database):
    """Application service enforcing the status transition table."""
    from app.services.application_service import ApplicationService

    return ApplicationService(database.session_factory, enforce_status_workflow=True)


@pytest.fixture
def test_client(test_settings):
    """Client for an app built from the test settings, lifespan included."""
    from app.main import create_app

    with TestClient(create_app(test_settings)) as client:
        yield client


@pytest.fixture
def sample_application_payload():
    """Applicant submission as sent by the web client."""
    return {
        "candidateName": "john.doe",
        "candidateEmail": "john@x.com",
        "candidateFullName": "John Doe",
        "position": "Backend Developer",
        "cvFilename": "john_cv.pdf",
    }


@pytest.fixture
def sample_application_create(sample_application_payload):
    """Sample ApplicationCreate for testing."""
    from app.schemas.application import ApplicationCreate

    return ApplicationCreate(**sample_application_payload)


@pytest.fixture
def make_application_create():
    """Build ApplicationCreate objects for other candidates."""
    from app.schemas.application import ApplicationCreate

    def _make(email: str, name: str = "candidate", position: str = "QA Engineer"):
        return ApplicationCreate(
            candidate_name=name,
            candidate_email=email,
            candidate_full_name=name.title(),
            position=position,
        )

    return _make
