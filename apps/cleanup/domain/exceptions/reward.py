"""Reward 도메인 예외."""

from apps.cleanup.domain.exceptions.base import DomainError


class InvalidPinError(DomainError):
    """일치하는 핀번호 없음."""

    def __init__(self) -> None:
        super().__init__("Invalid pin number")


class PinAlreadyUsedError(DomainError):
    """이미 사용된 핀번호."""

    def __init__(self, pin_id: int | None = None) -> None:
        self.pin_id = pin_id
        super().__init__("Pin number already used")


class PinExpiredError(DomainError):
    """만료된 핀번호."""

    def __init__(self, pin_id: int | None = None) -> None:
        self.pin_id = pin_id
        super().__init__("Pin number expired")
