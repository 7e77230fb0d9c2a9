from typing import Any

import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from swaproom.database import is_storage_failure, unit_of_work
from swaproom.exceptions import StorageUnavailableError
from swaproom.models.api.swaps import SwapType
from swaproom.services.participant_registry_service import ParticipantRegistryService
from swaproom.services.swap_coordinator_service import SwapCoordinatorService


def _operational_error() -> OperationalError:
    return OperationalError("SELECT 1", {}, ConnectionRefusedError("refused"))


@pytest.mark.asyncio
async def test_database_connection(test_db: AsyncSession) -> None:
    """Test that we can connect to the database."""
    result = await test_db.execute(text("SELECT 1"))
    assert result.scalar() == 1


def test_storage_failures_are_recognized() -> None:
    assert is_storage_failure(_operational_error()) is True
    assert is_storage_failure(ConnectionResetError()) is True
    assert is_storage_failure(IntegrityError("INSERT", {}, Exception())) is False
    assert is_storage_failure(ValueError()) is False


@pytest.mark.asyncio
async def test_unit_of_work_translates_storage_failures(mock_db: Any) -> None:
    with pytest.raises(StorageUnavailableError) as exc_info:
        async with unit_of_work(mock_db):
            raise _operational_error()

    assert isinstance(exc_info.value.__cause__, OperationalError)
    mock_db.rollback.assert_awaited_once()


@pytest.mark.asyncio
async def test_unit_of_work_reraises_other_errors(mock_db: Any) -> None:
    with pytest.raises(KeyError):
        async with unit_of_work(mock_db):
            raise KeyError("room")

    mock_db.rollback.assert_awaited_once()


@pytest.mark.asyncio
async def test_unit_of_work_survives_failed_rollback(mock_db: Any) -> None:
    mock_db.rollback.side_effect = _operational_error()

    with pytest.raises(StorageUnavailableError):
        async with unit_of_work(mock_db):
            raise _operational_error()


@pytest.mark.asyncio
async def test_unit_of_work_leaves_successful_work_alone(mock_db: Any) -> None:
    async with unit_of_work(mock_db) as db:
        assert db is mock_db

    mock_db.rollback.assert_not_called()


@pytest.mark.asyncio
async def test_record_swap_reports_unreachable_storage(mock_db: Any) -> None:
    mock_db.execute.side_effect = _operational_error()
    coordinator = SwapCoordinatorService(mock_db)

    with pytest.raises(StorageUnavailableError):
        await coordinator.record_swap(1, 1, 2, SwapType.MANUAL)


@pytest.mark.asyncio
async def test_set_ready_does_not_mistake_outage_for_missing(mock_db: Any) -> None:
    mock_db.execute.side_effect = _operational_error()
    registry = ParticipantRegistryService(mock_db)

    with pytest.raises(StorageUnavailableError):
        await registry.set_ready(1, True)


def test_storage_unavailable_payload() -> None:
    error = StorageUnavailableError()
    assert error.status_code == 503
    assert error.to_dict() == {
        "error": {
            "code": "storage_unavailable",
            "message": "Storage is unavailable",
            "details": {},
        }
    }
