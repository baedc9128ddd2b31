"""Not-found exceptions."""

from __future__ import annotations

from apps.cleanup.application.common.exceptions.base import ForbiddenError, NotFoundError


class MarkerNotFoundError(NotFoundError):
    def __init__(self, marker_id: int) -> None:
        self.marker_id = marker_id
        super().__init__(f"Marker not found: {marker_id}")


class RewardNotFoundError(NotFoundError):
    def __init__(self, reward_id: int) -> None:
        self.reward_id = reward_id
        super().__init__(f"Reward not found: {reward_id}")


class NotMarkerReporterError(ForbiddenError):
    """제보자가 아닌 사용자의 마커 삭제 시도."""

    def __init__(self, marker_id: int, user_id: int) -> None:
        self.marker_id = marker_id
        self.user_id = user_id
        super().__init__(f"User {user_id} is not the reporter of marker {marker_id}")


class NotMarkerParticipantError(ForbiddenError):
    """제보자도 사진 업로더도 아닌 사용자의 재검증 요청."""

    def __init__(self, marker_id: int, user_id: int) -> None:
        self.marker_id = marker_id
        self.user_id = user_id
        super().__init__(f"User {user_id} has no photos or report on marker {marker_id}")
