"""HTTP Controller 단위 테스트."""

from __future__ import annotations

import asyncio
from collections.abc import Generator
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from apps.cleanup.application.marker.commands import RegisterMarkerCommand, UploadPhotosCommand
from apps.cleanup.application.marker.queries import GetMarkerQuery
from apps.cleanup.application.point.queries import GetPointStatisticsQuery
from apps.cleanup.application.reward.commands import ExchangeRewardCommand, RedeemPinCommand
from apps.cleanup.application.reward.exceptions import CodeGenerationExhaustedError
from apps.cleanup.application.verification.commands import RetriggerVerificationCommand
from apps.cleanup.application.verification.dto import PhotoUploadedEvent
from apps.cleanup.application.verification.queries import GetVerificationStatusQuery
from apps.cleanup.domain.entities import RewardPin
from apps.cleanup.domain.enums import PhotoKind
from apps.cleanup.domain.exceptions import (
    InsufficientBalanceError,
    InvalidPinError,
    PinExpiredError,
)
from apps.cleanup.main import app
from apps.cleanup.setup.dependencies import (
    get_exchange_reward_command,
    get_get_marker_query,
    get_point_statistics_query,
    get_redeem_pin_command,
    get_register_marker_command,
    get_retrigger_verification_command,
    get_upload_photos_command,
    get_verification_status_query,
)

USER = {"X-User-Id": "1"}


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """TestClient 인스턴스. 테스트 후 override를 정리합니다."""
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestHealthController:
    def test_health_check(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "cleanup-api"}


class TestMarkersController:
    def test_register_marker(self, client: TestClient, markers, tx) -> None:
        app.dependency_overrides[get_register_marker_command] = lambda: RegisterMarkerCommand(
            markers, tx
        )

        response = client.post(
            "/api/v1/markers",
            json={"lat": 37.5665, "lng": 126.978, "description": "공원 입구"},
            headers=USER,
        )

        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "ACTIVE"
        assert data["reported_by"] == 1
        assert len(markers.items) == 1

    def test_register_requires_user(self, client: TestClient, markers, tx) -> None:
        app.dependency_overrides[get_register_marker_command] = lambda: RegisterMarkerCommand(
            markers, tx
        )

        response = client.post("/api/v1/markers", json={"lat": 1, "lng": 1})

        assert response.status_code == 401

    def test_invalid_coordinates_maps_to_422(self, client: TestClient, markers, tx) -> None:
        app.dependency_overrides[get_register_marker_command] = lambda: RegisterMarkerCommand(
            markers, tx
        )

        response = client.post("/api/v1/markers", json={"lat": 95, "lng": 1}, headers=USER)

        assert response.status_code == 422
        assert response.json()["code"] == "INVALID_COORDINATES"

    def test_get_missing_marker_maps_to_404(self, client: TestClient, markers) -> None:
        app.dependency_overrides[get_get_marker_query] = lambda: GetMarkerQuery(markers)

        response = client.get("/api/v1/markers/404")

        assert response.status_code == 404
        assert response.json()["code"] == "NOT_FOUND"

    def test_upload_after_photos(
        self, client: TestClient, make_marker, markers, photos, image_store, publisher, tx
    ) -> None:
        marker = make_marker()
        app.dependency_overrides[get_upload_photos_command] = lambda: UploadPhotosCommand(
            markers, photos, image_store, publisher, tx
        )

        response = client.post(
            f"/api/v1/markers/{marker.id}/photos",
            params={"kind": "AFTER"},
            files=[
                ("files", ("after1.jpg", b"jpeg-bytes-1", "image/jpeg")),
                ("files", ("after2.jpg", b"jpeg-bytes-2", "image/jpeg")),
            ],
            headers={"X-User-Id": "2"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["kind"] == "AFTER"
        assert len(data["photo_ids"]) == 2
        assert data["verification_requested"] is True
        assert len(publisher.events) == 1

    def test_verification_status(
        self, client: TestClient, make_marker, make_photo, markers, photos
    ) -> None:
        marker = make_marker()
        make_photo(marker, PhotoKind.BEFORE)
        app.dependency_overrides[get_verification_status_query] = (
            lambda: GetVerificationStatusQuery(markers, photos)
        )

        response = client.get(f"/api/v1/markers/{marker.id}/verification")

        assert response.status_code == 200
        data = response.json()
        assert data["photo_counts"] == {"BEFORE": 1, "AFTER": 0}
        assert data["verification_status"] is None

    def test_retrigger_verification(
        self, client: TestClient, make_marker, make_photo, markers, photos, publisher
    ) -> None:
        marker = make_marker(reported_by=1)
        make_photo(marker, PhotoKind.BEFORE, uploaded_by=1)
        after = make_photo(marker, PhotoKind.AFTER, uploaded_by=2)
        app.dependency_overrides[get_retrigger_verification_command] = (
            lambda: RetriggerVerificationCommand(markers, photos, publisher)
        )

        response = client.post(f"/api/v1/markers/{marker.id}/verification", headers=USER)

        assert response.status_code == 202
        assert response.json() == {
            "marker_id": marker.id,
            "photo_id": after.id,
            "verification_status": "PENDING",
            "verification_requested": True,
        }
        assert publisher.events == [PhotoUploadedEvent(marker.id, 1, PhotoKind.AFTER)]

    def test_retrigger_by_stranger_maps_to_403(
        self, client: TestClient, make_marker, make_photo, markers, photos, publisher
    ) -> None:
        marker = make_marker(reported_by=1)
        make_photo(marker, PhotoKind.AFTER, uploaded_by=2)
        app.dependency_overrides[get_retrigger_verification_command] = (
            lambda: RetriggerVerificationCommand(markers, photos, publisher)
        )

        response = client.post(
            f"/api/v1/markers/{marker.id}/verification", headers={"X-User-Id": "3"}
        )

        assert response.status_code == 403
        assert response.json()["code"] == "FORBIDDEN"
        assert publisher.events == []


class TestPointsController:
    def test_statistics(self, client: TestClient, users, history) -> None:
        app.dependency_overrides[get_point_statistics_query] = lambda: GetPointStatisticsQuery(
            users, history
        )

        response = client.get("/api/v1/points/statistics", headers=USER)

        assert response.status_code == 200
        assert response.json()["available_points"] == 0


class TestRewardsController:
    @pytest.fixture
    def exchange(self) -> AsyncMock:
        command = AsyncMock(spec=ExchangeRewardCommand)
        app.dependency_overrides[get_exchange_reward_command] = lambda: command
        return command

    @pytest.fixture
    def redeem(self) -> AsyncMock:
        command = AsyncMock(spec=RedeemPinCommand)
        app.dependency_overrides[get_redeem_pin_command] = lambda: command
        return command

    def test_insufficient_balance_maps_to_409(self, client: TestClient, exchange) -> None:
        exchange.execute.side_effect = InsufficientBalanceError(1, 4000, 5000)

        response = client.post(
            "/api/v1/rewards/exchange",
            json={"points": 5000, "reward_type": "FIVE_THOUSAND"},
            headers=USER,
        )

        assert response.status_code == 409
        assert response.json()["code"] == "INSUFFICIENT_BALANCE"

    def test_exhaustion_maps_to_503(self, client: TestClient, exchange) -> None:
        exchange.execute.side_effect = CodeGenerationExhaustedError(10)

        response = client.post(
            "/api/v1/rewards/exchange",
            json={"points": 5000, "reward_type": "FIVE_THOUSAND"},
            headers=USER,
        )

        assert response.status_code == 503
        assert response.headers["Retry-After"] == "1"

    def test_exchange_success_returns_full_pin(
        self, client: TestClient, ledger, rewards, pins, tx
    ) -> None:
        asyncio.run(ledger.credit(1, base_points=6000))
        app.dependency_overrides[get_exchange_reward_command] = lambda: ExchangeRewardCommand(
            ledger, rewards, pins, tx
        )

        response = client.post(
            "/api/v1/rewards/exchange",
            json={"points": 5000, "reward_type": "FIVE_THOUSAND"},
            headers=USER,
        )

        assert response.status_code == 201
        data = response.json()
        assert len(data["pin_number"]) == 19
        assert data["remaining_points"] == 1000
        assert data["status"] == "APPROVED"

    @pytest.mark.parametrize(
        ("error", "status_code", "code"),
        [
            (InvalidPinError(), 404, "INVALID_PIN"),
            (PinExpiredError(1), 409, "PIN_EXPIRED"),
        ],
    )
    def test_redeem_errors(self, client: TestClient, redeem, error, status_code, code) -> None:
        redeem.execute.side_effect = error

        response = client.post(
            "/api/v1/rewards/pins/redeem",
            json={"pin_number": "1234-5678-9012-3456"},
        )

        assert response.status_code == status_code
        assert response.json()["code"] == code

    def test_redeem_success(self, client: TestClient, redeem) -> None:
        now = datetime.now(timezone.utc)
        pin = RewardPin.issue(3, "1234-5678-9012-3456", now)
        pin.redeem(now)
        redeem.execute.return_value = pin

        response = client.post(
            "/api/v1/rewards/pins/redeem",
            json={"pin_number": "1234-5678-9012-3456"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["masked_pin_number"] == "****-****-****-3456"
        assert data["is_used"] is True
