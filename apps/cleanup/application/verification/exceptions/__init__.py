"""Verification exceptions."""

from __future__ import annotations

from apps.cleanup.application.common.exceptions import ApplicationError


class JudgeUnavailableError(ApplicationError):
    """외부 Judge 호출 실패 (네트워크/타임아웃/429/5xx).

    REJECTED 판정과 구분됩니다. 이벤트 재전달로 복구합니다.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Verification judge unavailable: {reason}")


class JudgeRequestError(ApplicationError):
    """Judge가 요청 자체를 거부함 (인증/권한/형식 오류 등 4xx).

    재전달해도 같은 결과이므로 재시도하지 않습니다.
    사진은 PENDING으로 남고 수동 재검증으로 복구합니다.
    """

    def __init__(self, status_code: int, reason: str) -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"Verification judge rejected the request ({status_code}): {reason}")


__all__ = ["JudgeRequestError", "JudgeUnavailableError"]
