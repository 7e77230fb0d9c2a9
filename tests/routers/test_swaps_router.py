from datetime import datetime, timezone
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from swaproom.exceptions import StorageUnavailableError, SwapConflictError
from swaproom.main import app
from swaproom.models.api.swaps import (
    RandomSwapResponse,
    RecordSwapResponse,
    SwapHistoryEntry,
    SwapType,
)

COORDINATOR = "swaproom.services.swap_coordinator_service.SwapCoordinatorService"


class TestSwapsRouter:
    """Unit tests for the swaps router endpoints."""

    @pytest.fixture
    def client(self) -> TestClient:
        return TestClient(app)

    def test_record_swap(self, client: TestClient) -> None:
        with patch(
            f"{COORDINATOR}.record_swap",
            new_callable=AsyncMock,
            return_value=RecordSwapResponse(swap_id=7),
        ) as mock_record:
            response = client.post(
                "/api/rooms/1/swaps",
                json={
                    "from_participant_id": 1,
                    "to_participant_id": 3,
                    "swap_type": "manual",
                },
            )

        assert response.status_code == 201
        assert response.json() == {"swap_id": 7}
        mock_record.assert_awaited_once_with(1, 1, 3, SwapType.MANUAL)

    def test_record_swap_rejects_unknown_type(self, client: TestClient) -> None:
        response = client.post(
            "/api/rooms/1/swaps",
            json={"from_participant_id": 1, "to_participant_id": 3, "swap_type": "auto"},
        )
        assert response.status_code == 422

    @pytest.mark.parametrize(
        "error, status_code",
        [(SwapConflictError(), 409), (StorageUnavailableError(), 503)],
    )
    def test_record_swap_failures(
        self, client: TestClient, error: Exception, status_code: int
    ) -> None:
        with patch(
            f"{COORDINATOR}.record_swap", new_callable=AsyncMock, side_effect=error
        ):
            response = client.post(
                "/api/rooms/1/swaps",
                json={
                    "from_participant_id": 1,
                    "to_participant_id": 3,
                    "swap_type": "random",
                },
            )

        assert response.status_code == status_code

    def test_random_swap_without_candidates(self, client: TestClient) -> None:
        with patch(
            f"{COORDINATOR}.random_swap",
            new_callable=AsyncMock,
            return_value=RandomSwapResponse(no_candidates=True),
        ) as mock_random:
            response = client.post(
                "/api/rooms/1/swaps/random",
                json={"from_participant_id": 1, "current_target_id": 2},
            )

        assert response.status_code == 200
        assert response.json()["no_candidates"] is True
        assert response.json()["swap_id"] is None
        mock_random.assert_awaited_once_with(1, 1, 2)

    def test_swap_history(self, client: TestClient) -> None:
        entry = SwapHistoryEntry(
            id=5,
            room_id=1,
            from_participant_id=1,
            to_participant_id=3,
            from_label="A",
            to_label="C",
            swap_type=SwapType.MANUAL,
            created_at=datetime.now(timezone.utc),
        )
        with patch(
            f"{COORDINATOR}.history", new_callable=AsyncMock, return_value=[entry]
        ) as mock_history:
            response = client.get("/api/rooms/1/swaps?limit=10")

        assert response.status_code == 200
        data = response.json()
        assert data[0]["swap_type"] == "manual"
        assert data[0]["to_label"] == "C"
        mock_history.assert_awaited_once_with(1, 10)

    def test_swap_history_limit_bounds(self, client: TestClient) -> None:
        assert client.get("/api/rooms/1/swaps?limit=0").status_code == 422
        assert client.get("/api/rooms/1/swaps?limit=101").status_code == 422
