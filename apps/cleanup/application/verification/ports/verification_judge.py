"""Verification judge port."""

from __future__ import annotations

from abc import ABC, abstractmethod

from apps.cleanup.domain.value_objects import Verdict


class VerificationJudge(ABC):
    """청소 전/후 사진을 비교해 판정하는 외부 Judge 포트.

    구현체는 다음을 보장해야 합니다:
    - 해석 불가능한 응답은 Verdict.fail_closed (REJECTED, confidence=None)
    - 네트워크/타임아웃/429/5xx 실패는 JudgeUnavailableError
    - 재시도해도 같은 결과인 요청 거부(그 외 4xx)는 JudgeRequestError
    """

    @abstractmethod
    async def judge(self, before_ref: str, after_ref: str, location_hint: str) -> Verdict:
        """두 이미지 참조와 위치 문맥으로 판정합니다.

        Raises:
            JudgeUnavailableError: Judge에 도달할 수 없음
            JudgeRequestError: Judge가 요청을 거부함 (재시도 불가)
            ImageNotFoundError: 이미지 참조가 저장소에 없음
            ImageStorageError: 저장소 일시 장애
        """
