"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
FastAPI는 예외 MRO를 따라 가장 구체적인 핸들러를 선택합니다.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from apps.cleanup.application.common.exceptions import (
    ApplicationError,
    ForbiddenError,
    ImageStorageError,
    NotFoundError,
    ValidationError,
)
from apps.cleanup.application.reward.exceptions import CodeGenerationExhaustedError
from apps.cleanup.domain.exceptions import (
    DomainError,
    InsufficientBalanceError,
    InvalidCoordinatesError,
    InvalidMarkerTransitionError,
    InvalidPinError,
    PinAlreadyUsedError,
    PinExpiredError,
)

# (예외, HTTP 상태, 응답 코드)
ERROR_MAP: list[tuple[type[Exception], int, str]] = [
    (InvalidCoordinatesError, 422, "INVALID_COORDINATES"),
    (ValidationError, 422, "INVALID_REQUEST"),
    (NotFoundError, 404, "NOT_FOUND"),
    (InvalidPinError, 404, "INVALID_PIN"),
    (ForbiddenError, 403, "FORBIDDEN"),
    (InsufficientBalanceError, 409, "INSUFFICIENT_BALANCE"),
    (PinAlreadyUsedError, 409, "PIN_ALREADY_USED"),
    (PinExpiredError, 409, "PIN_EXPIRED"),
    (InvalidMarkerTransitionError, 409, "INVALID_MARKER_TRANSITION"),
    (CodeGenerationExhaustedError, 503, "PIN_GENERATION_EXHAUSTED"),
    (ImageStorageError, 503, "IMAGE_STORAGE_UNAVAILABLE"),
    (DomainError, 400, "DOMAIN_ERROR"),
    (ApplicationError, 400, "APPLICATION_ERROR"),
]


def _make_handler(status_code: int, code: str):
    async def handler(request: Request, exc: Exception) -> JSONResponse:
        headers = {"Retry-After": "1"} if status_code == 503 else None
        return JSONResponse(
            status_code=status_code,
            content={"detail": getattr(exc, "message", str(exc)), "code": code},
            headers=headers,
        )

    return handler


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""
    for exc_class, status_code, code in ERROR_MAP:
        app.add_exception_handler(exc_class, _make_handler(status_code, code))
