"""Domain 레이어 단위 테스트."""

from __future__ import annotations

import random
import re
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from apps.cleanup.domain.clock import add_years
from apps.cleanup.domain.entities import (
    Marker,
    Photo,
    PointHistory,
    Reward,
    RewardPin,
    User,
    mask_pin_number,
)
from apps.cleanup.domain.enums import (
    MarkerStatus,
    PhotoKind,
    PointType,
    RewardStatus,
    VerdictResult,
    VerificationStatus,
)
from apps.cleanup.domain.exceptions import (
    InsufficientBalanceError,
    InvalidCoordinatesError,
    InvalidMarkerTransitionError,
    PhotoNotVerifiableError,
    PinAlreadyUsedError,
    PinExpiredError,
    VerificationGuardSkip,
)
from apps.cleanup.domain.services import PinGenerator, PointPolicy
from apps.cleanup.domain.value_objects import Coordinates, Verdict

NOW = datetime(2026, 3, 15, 9, 0, tzinfo=timezone.utc)


def _approved(confidence: float | None = 0.9) -> Verdict:
    return Verdict(VerdictResult.APPROVED, confidence, "깨끗해짐", raw_output="{}")


class TestCoordinates:
    def test_normalizes_to_eight_decimals(self) -> None:
        coords = Coordinates.of(37.5665, "126.978")
        assert coords.lat == Decimal("37.56650000")
        assert coords.lng == Decimal("126.97800000")

    @pytest.mark.parametrize(
        ("lat", "lng"),
        [(90.0001, 0), (-91, 0), (0, 180.5), (0, -181), ("abc", 0)],
    )
    def test_rejects_out_of_range(self, lat, lng) -> None:
        with pytest.raises(InvalidCoordinatesError):
            Coordinates.of(lat, lng)

    def test_accepts_boundaries(self) -> None:
        coords = Coordinates.of(-90, 180)
        assert coords.lat == Decimal(-90)


class TestMarker:
    def _marker(self, status: MarkerStatus = MarkerStatus.ACTIVE) -> Marker:
        marker = Marker.report(1, Coordinates.of(37.5, 127.0), "공원 입구")
        marker.status = status
        return marker

    def test_report_starts_active(self) -> None:
        marker = self._marker()
        assert marker.is_active()
        assert marker.is_reported_by(1)
        assert not marker.is_reported_by(2)

    def test_mark_cleaned_transitions_once(self) -> None:
        marker = self._marker()
        assert marker.mark_cleaned() is True
        assert marker.status == MarkerStatus.CLEANED
        assert marker.mark_cleaned() is False

    def test_removed_marker_cannot_be_cleaned(self) -> None:
        marker = self._marker(MarkerStatus.REMOVED)
        with pytest.raises(InvalidMarkerTransitionError):
            marker.mark_cleaned()

    @pytest.mark.parametrize("status", [MarkerStatus.ACTIVE, MarkerStatus.CLEANED])
    def test_mark_removed(self, status: MarkerStatus) -> None:
        marker = self._marker(status)
        marker.mark_removed()
        assert marker.is_removed()
        with pytest.raises(InvalidMarkerTransitionError):
            marker.mark_removed()

    def test_location_hint(self) -> None:
        marker = Marker(
            reported_by=1,
            lat=Decimal("37.5"),
            lng=Decimal("127.0"),
            description="공원 입구",
            address="서울시 중구",
        )
        assert marker.location_hint == "공원 입구 / 서울시 중구"
        marker.description = None
        marker.address = None
        assert marker.location_hint == "위치 설명 없음"


class TestPhoto:
    def _photo(self, kind: PhotoKind = PhotoKind.AFTER) -> Photo:
        return Photo(marker_id=1, uploaded_by=2, image_ref="img/1.jpg", kind=kind, id=10)

    def test_apply_approved_verdict(self) -> None:
        photo = self._photo()
        photo.apply_verdict(_approved(0.85), NOW)

        assert photo.verification_status == VerificationStatus.APPROVED
        assert photo.confidence == 0.85
        assert photo.rationale == "깨끗해짐"
        assert photo.verified_at == NOW
        assert photo.judge_raw_output == "{}"

    def test_apply_rejected_verdict(self) -> None:
        photo = self._photo()
        photo.apply_verdict(Verdict.fail_closed("파싱 실패"), NOW)

        assert photo.verification_status == VerificationStatus.REJECTED
        assert photo.confidence is None

    def test_second_verdict_is_guarded(self) -> None:
        photo = self._photo()
        photo.apply_verdict(_approved(), NOW)

        with pytest.raises(VerificationGuardSkip) as exc_info:
            photo.apply_verdict(Verdict.fail_closed("재시도"), NOW)

        assert exc_info.value.status == "APPROVED"
        assert photo.is_approved()

    def test_before_photo_is_not_verifiable(self) -> None:
        with pytest.raises(PhotoNotVerifiableError):
            self._photo(PhotoKind.BEFORE).apply_verdict(_approved(), NOW)


class TestVerdict:
    def test_confidence_range_enforced(self) -> None:
        with pytest.raises(ValueError):
            Verdict(VerdictResult.APPROVED, 1.2, "x")

    def test_fail_closed_is_rejected_without_confidence(self) -> None:
        verdict = Verdict.fail_closed("형식 오류", raw_output="not json")
        assert not verdict.approved
        assert verdict.confidence is None
        assert verdict.raw_output == "not json"


class TestPointPolicy:
    @pytest.mark.parametrize(
        ("confidence", "expected"),
        [(0.85, 120), (0.8, 120), (0.79, 100), (0.4, 100), (None, 100)],
    )
    def test_bonus_threshold(self, confidence: float | None, expected: int) -> None:
        assert PointPolicy().calculate(confidence) == expected

    def test_custom_base_points(self) -> None:
        assert PointPolicy().calculate(0.9, base_points=50) == 70

    def test_describe(self) -> None:
        assert PointPolicy.describe(0.85) == "청소 인증 완료 (신뢰도: 85%)"
        assert PointPolicy.describe(None) == "청소 인증 완료"


class TestPointHistory:
    def test_signs(self) -> None:
        earned = PointHistory.earned(1, 120, "청소 인증 완료", related_photo_id=3)
        used = PointHistory.used(1, 5000, "상품권 교환 완료: FIVE_THOUSAND")

        assert (earned.delta, earned.type) == (120, PointType.EARNED)
        assert (used.delta, used.type) == (-5000, PointType.USED)
        assert used.amount == 5000

    @pytest.mark.parametrize("points", [0, -10])
    def test_rejects_non_positive(self, points: int) -> None:
        with pytest.raises(ValueError):
            PointHistory.earned(1, points, "x")
        with pytest.raises(ValueError):
            PointHistory.used(1, points, "x")


class TestUser:
    def test_use_points_insufficient(self) -> None:
        user = User(id=1, points=4000)
        with pytest.raises(InsufficientBalanceError) as exc_info:
            user.use_points(5000)
        assert exc_info.value.balance == 4000
        assert user.points == 4000

    def test_add_and_use(self) -> None:
        user = User(id=1)
        user.add_points(120)
        user.use_points(20)
        assert user.points == 100


class TestPins:
    def test_generator_format(self) -> None:
        generator = PinGenerator(random.Random(42))
        pins = {generator.generate() for _ in range(50)}
        assert all(re.fullmatch(r"\d{4}-\d{4}-\d{4}-\d{4}", p) for p in pins)
        assert len(pins) > 1

    def test_generator_is_deterministic_with_seed(self) -> None:
        assert PinGenerator(random.Random(7)).generate() == PinGenerator(random.Random(7)).generate()

    def test_mask(self) -> None:
        assert mask_pin_number("1234-5678-9012-3456") == "****-****-****-3456"
        assert mask_pin_number(None) == "****-****-****-****"
        assert mask_pin_number("123") == "****-****-****-****"

    def test_issue_expires_one_calendar_year_later(self) -> None:
        pin = RewardPin.issue(1, "1234-5678-9012-3456", NOW)
        assert pin.expires_at == datetime(2027, 3, 15, 9, 0, tzinfo=timezone.utc)
        assert pin.is_available(NOW)

    def test_leap_day_issue(self) -> None:
        leap = datetime(2028, 2, 29, 12, 0, tzinfo=timezone.utc)
        assert add_years(leap, 1) == datetime(2029, 2, 28, 12, 0, tzinfo=timezone.utc)

    def test_expiry_boundary(self) -> None:
        pin = RewardPin.issue(1, "1234-5678-9012-3456", NOW)
        assert not pin.is_expired(pin.expires_at - timedelta(seconds=1))
        assert pin.is_expired(pin.expires_at)

    def test_redeem_checks_used_before_expiry(self) -> None:
        pin = RewardPin.issue(1, "1234-5678-9012-3456", NOW)
        pin.redeem(NOW)
        assert pin.is_used and pin.used_at == NOW

        with pytest.raises(PinAlreadyUsedError):
            pin.redeem(pin.expires_at + timedelta(days=1))

    def test_redeem_expired(self) -> None:
        pin = RewardPin.issue(1, "1234-5678-9012-3456", NOW)
        with pytest.raises(PinExpiredError):
            pin.redeem(pin.expires_at)
        assert not pin.is_used


class TestReward:
    def test_immediate_exchange_is_approved(self) -> None:
        reward = Reward.immediate_exchange(1, 5000, "FIVE_THOUSAND", now=NOW)
        assert reward.status == RewardStatus.APPROVED
        assert reward.is_approved()
        assert reward.processed_at == NOW
