import re
from typing import Any
from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from swaproom.exceptions import DuplicateCodeError, ExhaustedRetriesError
from swaproom.models.db.participant_model import ParticipantModel
from swaproom.models.db.room_model import RoomModel
from swaproom.repositories.participant_repository import ParticipantRepository
from swaproom.repositories.room_repository import RoomRepository
from swaproom.services.room_lifecycle_service import RoomLifecycleService


async def _count(db: AsyncSession, model: Any) -> int:
    result = await db.execute(select(func.count(model.id)))
    return int(result.scalar())


class TestRoomLifecycleService:
    """Integration tests for RoomLifecycleService against SQLite."""

    @pytest.fixture
    def service(self, test_db: AsyncSession) -> RoomLifecycleService:
        return RoomLifecycleService(test_db)

    def test_service_initialization(self, mock_db: AsyncMock) -> None:
        service = RoomLifecycleService(mock_db)
        assert service.db == mock_db
        assert isinstance(service.room_repo, RoomRepository)
        assert isinstance(service.participant_repo, ParticipantRepository)

    @pytest.mark.asyncio
    async def test_create_room_registers_host(
        self, service: RoomLifecycleService, test_db: AsyncSession
    ) -> None:
        created = await service.create_room("Movie Night", "Ann", 4)

        assert re.match(r"^[A-Z0-9]{6}$", created.code)

        room = await RoomRepository(test_db).get_by_id(created.room_id)
        assert room is not None
        assert room.is_active is True
        assert room.max_participants == 4
        assert room.host_id == created.participant_id

        participants = await ParticipantRepository(test_db).get_by_room(room.id)
        assert len(participants) == 1
        host = participants[0]
        assert host.id == created.participant_id
        assert host.guest_name == "Ann"
        assert host.is_host is True
        assert host.is_ready is False

    @pytest.mark.asyncio
    async def test_create_room_codes_are_unique(
        self, service: RoomLifecycleService
    ) -> None:
        codes = {(await service.create_room(f"Room {i}", "Host", 2)).code for i in range(20)}
        assert len(codes) == 20

    @pytest.mark.asyncio
    @pytest.mark.parametrize("max_participants", [1, 9])
    async def test_create_room_rejects_capacity_out_of_range(
        self, service: RoomLifecycleService, max_participants: int
    ) -> None:
        with pytest.raises(ValueError):
            await service.create_room("Movie Night", "Ann", max_participants)

    @pytest.mark.asyncio
    async def test_code_taken_at_insert_raises_duplicate_code(
        self, service: RoomLifecycleService, test_db: AsyncSession
    ) -> None:
        await RoomRepository(test_db).add_room(
            code="DUPE01", name="First", max_participants=4
        )

        with patch.object(
            service.code_generator,
            "ensure_unique",
            new_callable=AsyncMock,
            return_value="DUPE01",
        ):
            with pytest.raises(DuplicateCodeError):
                await service.create_room("Second", "Ben", 4)

        assert await _count(test_db, RoomModel) == 1
        assert await _count(test_db, ParticipantModel) == 0

    @pytest.mark.asyncio
    async def test_exhausted_retries_propagates(
        self, service: RoomLifecycleService, test_db: AsyncSession
    ) -> None:
        with patch.object(
            service.code_generator,
            "ensure_unique",
            new_callable=AsyncMock,
            side_effect=ExhaustedRetriesError(),
        ):
            with pytest.raises(ExhaustedRetriesError):
                await service.create_room("Movie Night", "Ann", 4)

        assert await _count(test_db, RoomModel) == 0

    @pytest.mark.asyncio
    async def test_failed_host_registration_leaves_no_room(
        self, service: RoomLifecycleService, test_db: AsyncSession
    ) -> None:
        with patch.object(
            service.participant_repo,
            "add_participant",
            new_callable=AsyncMock,
            side_effect=RuntimeError("insert failed"),
        ):
            with pytest.raises(RuntimeError):
                await service.create_room("Movie Night", "Ann", 4)

        assert await _count(test_db, RoomModel) == 0

    @pytest.mark.asyncio
    async def test_end_room_is_idempotent(
        self, service: RoomLifecycleService, test_db: AsyncSession
    ) -> None:
        created = await service.create_room("Movie Night", "Ann", 4)

        first = await service.end_room(created.room_id)
        second = await service.end_room(created.room_id)

        assert first is not None and first.is_active is False
        assert second is not None and second.is_active is False
        room = await RoomRepository(test_db).get_by_id(created.room_id)
        assert room is not None and room.is_active is False

    @pytest.mark.asyncio
    async def test_end_unknown_room_is_a_no_op(
        self, service: RoomLifecycleService
    ) -> None:
        assert await service.end_room(4242) is None
