import os
from typing import Any, AsyncGenerator, Generator
from unittest.mock import AsyncMock, MagicMock

import pytest
from dotenv import load_dotenv

load_dotenv()
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

import swaproom.models  # noqa: E402,F401
from swaproom.database import Base  # noqa: E402
from swaproom.main import app  # noqa: E402
from swaproom.services.participant_registry_service import (  # noqa: E402
    ParticipantRegistryService,
)
from swaproom.services.room_lifecycle_service import RoomLifecycleService  # noqa: E402


@pytest.fixture(scope="function")
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database with all tables for one test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Clean up
    await engine.dispose()


@pytest.fixture(scope="function")
async def test_db(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session for integration tests."""
    session_factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )

    async with session_factory() as session:
        yield session


@pytest.fixture(scope="function")
def mock_db() -> Generator[AsyncMock, Any, None]:
    """Create a mock database session for unit tests."""
    mock_session = AsyncMock()
    mock_session.commit = AsyncMock()
    mock_session.rollback = AsyncMock()
    mock_session.close = AsyncMock()
    mock_session.refresh = AsyncMock()
    mock_session.flush = AsyncMock()
    mock_session.execute = AsyncMock()
    mock_session.add = MagicMock()  # add is sync, not async

    yield mock_session


@pytest.fixture
def make_room(test_db: AsyncSession) -> Any:
    """Factory creating a room with its host and extra joined guests.

    Returns (create_response, {guest_name: participant_id}) including the host.
    """

    async def _make_room(
        name: str = "Movie Night",
        host: str = "Ann",
        guests: tuple = (),
        max_participants: int = 4,
    ) -> Any:
        created = await RoomLifecycleService(test_db).create_room(
            name=name, host_guest_name=host, max_participants=max_participants
        )
        ids = {host: created.participant_id}
        registry = ParticipantRegistryService(test_db)
        for guest in guests:
            joined = await registry.join(created.code, guest)
            ids[guest] = joined.participant_id
        return created, ids

    return _make_room


@pytest.fixture
def client() -> Generator[TestClient, Any, None]:
    """Create a test client for the FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client
