"""Base application exceptions."""

from __future__ import annotations


class ApplicationError(Exception):
    """애플리케이션 계층 기본 예외."""

    def __init__(self, message: str = "Application error occurred") -> None:
        self.message = message
        super().__init__(message)


class ValidationError(ApplicationError):
    """잘못된 입력."""


class InvalidRequestError(ValidationError):
    """요청 값이 규칙을 만족하지 않음 (예: 0 이하 포인트)."""


class NotFoundError(ApplicationError):
    """조회 대상 없음."""


class ForbiddenError(ApplicationError):
    """권한 없음."""
