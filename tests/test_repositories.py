from typing import Any
from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from swaproom.models.db.room_model import RoomModel
from swaproom.repositories.base_repository import BaseRepository
from swaproom.repositories.participant_repository import ParticipantRepository
from swaproom.repositories.room_repository import RoomRepository
from swaproom.repositories.swap_repository import SwapRepository


class TestBaseRepository:
    """Unit tests for BaseRepository functionality."""

    def test_base_repository_creation(self, mock_db: Any) -> None:
        """Test that BaseRepository can be instantiated."""
        repo: BaseRepository = BaseRepository(mock_db, RoomModel)
        assert repo.db is mock_db
        assert repo.model_class is RoomModel

    @pytest.mark.asyncio
    async def test_get_by_id_not_found(self, mock_db: Any) -> None:
        repo: BaseRepository = BaseRepository(mock_db, RoomModel)

        mock_result = MagicMock()
        mock_result.scalar_one_or_none.return_value = None
        mock_db.execute.return_value = mock_result

        assert await repo.get_by_id(1) is None
        mock_db.execute.assert_called_once()

    @pytest.mark.asyncio
    async def test_delete_not_found(self, mock_db: Any) -> None:
        repo: BaseRepository = BaseRepository(mock_db, RoomModel)

        mock_result = MagicMock()
        mock_result.scalar_one_or_none.return_value = None
        mock_db.execute.return_value = mock_result

        assert await repo.delete(1) is False
        mock_db.commit.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_without_commit_only_flushes(self, mock_db: Any) -> None:
        repo = RoomRepository(mock_db)

        with patch.object(repo, "_to_pydantic", return_value=MagicMock()):
            await repo.add_room(
                code="ABC123", name="Room", max_participants=4, commit=False
            )

        mock_db.add.assert_called_once()
        mock_db.flush.assert_awaited_once()
        mock_db.commit.assert_not_called()


class TestRoomRepository:
    """Integration tests for RoomRepository against SQLite."""

    @pytest.mark.asyncio
    async def test_lookup_by_code(self, test_db: AsyncSession) -> None:
        repo = RoomRepository(test_db)
        room = await repo.add_room(code="ROOM42", name="Room", max_participants=3)

        found = await repo.get_by_code("ROOM42", for_update=True)

        assert found is not None
        assert found.id == room.id
        assert found.is_active is True
        assert await repo.get_by_code("NOPE00") is None

    @pytest.mark.asyncio
    async def test_code_exists(self, test_db: AsyncSession) -> None:
        repo = RoomRepository(test_db)
        await repo.add_room(code="ROOM42", name="Room", max_participants=3)

        assert await repo.code_exists("ROOM42") is True
        assert await repo.code_exists("ROOM43") is False

    @pytest.mark.asyncio
    async def test_codes_are_unique(self, test_db: AsyncSession) -> None:
        repo = RoomRepository(test_db)
        await repo.add_room(code="ROOM42", name="Room", max_participants=3)

        with pytest.raises(IntegrityError):
            await repo.add_room(code="ROOM42", name="Other", max_participants=3)
        await test_db.rollback()

    @pytest.mark.asyncio
    async def test_deactivate_is_terminal(self, test_db: AsyncSession) -> None:
        repo = RoomRepository(test_db)
        room = await repo.add_room(code="ROOM42", name="Room", max_participants=3)

        ended = await repo.deactivate(room.id)
        again = await repo.deactivate(room.id)

        assert ended is not None and ended.is_active is False
        assert again is not None and again.is_active is False
        assert await repo.deactivate(999) is None


class TestParticipantRepository:
    """Integration tests for ParticipantRepository against SQLite."""

    @pytest.mark.asyncio
    async def test_add_and_remove(self, test_db: AsyncSession) -> None:
        room = await RoomRepository(test_db).add_room(
            code="ROOM42", name="Room", max_participants=3
        )
        repo = ParticipantRepository(test_db)
        ann = await repo.add_participant(room.id, "Ann", is_host=True)
        await repo.add_participant(room.id, "Ben", user_id=7)

        assert len(await repo.get_by_room(room.id)) == 2
        assert await repo.delete(ann.id) is True
        assert [p.guest_name for p in await repo.get_by_room(room.id)] == ["Ben"]
        assert await repo.get_by_id(ann.id) is None

    @pytest.mark.asyncio
    async def test_add_if_space_stops_at_capacity(self, test_db: AsyncSession) -> None:
        room = await RoomRepository(test_db).add_room(
            code="ROOM42", name="Room", max_participants=2
        )
        repo = ParticipantRepository(test_db)
        await repo.add_participant(room.id, "Ann", is_host=True)

        ben = await repo.add_participant_if_space(room.id, 2, "Ben", user_id=7)
        cat = await repo.add_participant_if_space(room.id, 2, "Cat")

        assert ben is not None
        assert ben.room_id == room.id
        assert ben.user_id == 7
        assert ben.is_host is False
        assert ben.is_ready is False
        assert ben.joined_at is not None
        assert cat is None
        assert len(await repo.get_by_room(room.id)) == 2

    @pytest.mark.asyncio
    async def test_updates_missing_participant(self, test_db: AsyncSession) -> None:
        repo = ParticipantRepository(test_db)

        assert await repo.set_ready(1, True) is None
        assert await repo.set_platform(1, "netflix") is None


class TestSwapRepository:
    """Integration tests for SwapRepository against SQLite."""

    @pytest.mark.asyncio
    async def test_counts_per_room(self, test_db: AsyncSession) -> None:
        repo = SwapRepository(test_db)
        await repo.record(1, 10, 11, "manual")
        await repo.record(1, 11, 10, "random")
        await repo.record(2, 20, 21, "manual")

        assert await repo.count_by_room(1) == 2
        assert await repo.count_by_room(3) == 0
