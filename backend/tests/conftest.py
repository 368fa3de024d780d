"""
City Info Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every test gets a fresh in-memory SQLite database (aiosqlite +
       StaticPool so all sessions share one connection), seeded with the
       same rows as the Alembic seed migration.

Fixture Hierarchy (all function-scoped):
    db_engine ──┬── session_factory ──┬── db_session       (repository tests)
                │                     └── test_client      (API tests)
                └── mail_outbox        (recording MailService)
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["MAIL_SERVICE"] = "local"

from typing import List, Tuple  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.database import Base, get_db_session  # noqa: E402
from app.models.city import City  # noqa: E402
from app.models.point_of_interest import PointOfInterest  # noqa: E402
from app.seed_data import SEED_CITIES, SEED_POINTS_OF_INTEREST  # noqa: E402
from app.services.mail_service import MailService, get_mail_service  # noqa: E402


class RecordingMailService(MailService):
    """MailService that keeps every sent mail for assertions."""

    def __init__(self) -> None:
        self.mail_to = "tests@cityinfo.local"
        self.mail_from = "noreply@cityinfo.local"
        self.sent: List[Tuple[str, str]] = []

    def send(self, subject: str, message: str) -> None:
        self.sent.append((subject, message))


@pytest_asyncio.fixture
async def db_engine():
    """In-memory database with schema and seed rows."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        await conn.execute(City.__table__.insert(), SEED_CITIES)
        await conn.execute(PointOfInterest.__table__.insert(), SEED_POINTS_OF_INTEREST)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    """A standalone session, for exercising the repository directly."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def mail_outbox():
    return RecordingMailService()


@pytest_asyncio.fixture
async def test_client(session_factory, mail_outbox):
    """
    HTTPX AsyncClient talking to the FastAPI app through ASGITransport.

    get_db_session is replaced with one bound to the test database, keeping
    the production commit/rollback/close behaviour.
    """
    from app.main import app

    async def override_get_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_mail_service] = lambda: mail_outbox

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def sample_point_of_interest():
    return {
        "name": "Central Park",
        "description": "The most visited urban park in the United States.",
    }
