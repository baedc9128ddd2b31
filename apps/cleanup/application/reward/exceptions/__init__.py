"""Reward exceptions."""

from __future__ import annotations

from apps.cleanup.application.common.exceptions import ApplicationError


class DuplicatePinError(ApplicationError):
    """핀번호 유일성 제약 위반 (동시 발급 경합)."""

    def __init__(self) -> None:
        super().__init__("Pin number already exists")


class CodeGenerationExhaustedError(ApplicationError):
    """재시도 한도 내에 유일한 핀번호를 만들지 못함.

    보상 트랜잭션 이후 발생하며 재시도 가능한 서버 오류입니다.
    """

    def __init__(self, attempts: int) -> None:
        self.attempts = attempts
        super().__init__(f"Failed to generate a unique pin number after {attempts} attempts")


__all__ = ["CodeGenerationExhaustedError", "DuplicatePinError"]
