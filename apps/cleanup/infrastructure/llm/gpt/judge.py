"""GPT Verification Judge - VerificationJudge 구현체.

OpenAI chat.completions + json_schema 구조화 출력.
청소 전/후 사진 두 장을 data URL로 첨부해 한 번 호출합니다.
"""

from __future__ import annotations

import asyncio
import logging
from functools import partial
from typing import Any, Literal

import httpx
import openai
from openai import AsyncOpenAI
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from apps.cleanup.application.common.ports import ImageStore
from apps.cleanup.application.verification.exceptions import (
    JudgeRequestError,
    JudgeUnavailableError,
)
from apps.cleanup.application.verification.ports import VerificationJudge
from apps.cleanup.domain.enums import VerdictResult
from apps.cleanup.domain.value_objects import Verdict
from apps.cleanup.infrastructure.llm.gpt.config import (
    DEFAULT_TIMEOUT_SECONDS,
    JUDGE_MAX_TOKENS,
    MAX_RETRIES,
    OPENAI_LIMITS,
    build_timeout,
)
from apps.cleanup.infrastructure.storage.image_normalizer import (
    ImageNormalizer,
    InvalidImageError,
)

logger = logging.getLogger(__name__)


# ==========================================
# Pydantic 모델 (구조화 출력)
# ==========================================


class JudgeOutput(BaseModel):
    """Judge 응답 구조. 정확히 result / confidence / reason 세 필드."""

    model_config = ConfigDict(extra="forbid")

    result: Literal["APPROVED", "REJECTED"]
    confidence: float = Field(ge=0.0, le=1.0)
    reason: str


JUDGE_RESPONSE_FORMAT = {
    "type": "json_schema",
    "json_schema": {
        "name": "cleanup_verdict",
        "strict": True,
        "schema": {
            "type": "object",
            "properties": {
                "result": {"type": "string", "enum": ["APPROVED", "REJECTED"]},
                "confidence": {"type": "number"},
                "reason": {"type": "string"},
            },
            "required": ["result", "confidence", "reason"],
            "additionalProperties": False,
        },
    },
}

# Judge에 도달하지 못한 경우로 보는 오류
_UNAVAILABLE_ERRORS: tuple[type[Exception], ...] = (
    openai.APIConnectionError,
    httpx.TimeoutException,
    asyncio.TimeoutError,
)

# 재전달로 회복될 수 있는 HTTP 상태 (그 외 4xx는 재시도하지 않음)
RETRYABLE_STATUS_CODES = frozenset({408, 409, 429})


def is_retryable_status(status_code: int) -> bool:
    return status_code in RETRYABLE_STATUS_CODES or status_code >= 500


class GPTVerificationJudge(VerificationJudge):
    """GPT Vision 기반 청소 인증 Judge."""

    def __init__(
        self,
        image_store: ImageStore,
        prompt: str,
        normalizer: ImageNormalizer | None = None,
        model: str = "gpt-4o-mini",
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        api_key: str | None = None,
        client: AsyncOpenAI | None = None,
    ) -> None:
        """초기화.

        Args:
            image_store: 이미지 저장소
            prompt: 시스템 프롬프트 ({location} 자리표시자 포함)
            normalizer: 이미지 축소/재인코딩기
            model: GPT 모델명
            timeout_seconds: Judge 호출 전체 타임아웃
            api_key: OpenAI API 키 (None이면 환경변수 사용)
            client: 주입할 클라이언트 (테스트용)
        """
        self._image_store = image_store
        self._prompt = prompt
        self._normalizer = normalizer or ImageNormalizer()
        self._model = model
        self._timeout_seconds = timeout_seconds
        if client is None:
            http_client = httpx.AsyncClient(
                timeout=build_timeout(timeout_seconds),
                limits=OPENAI_LIMITS,
            )
            client = AsyncOpenAI(
                api_key=api_key,
                http_client=http_client,
                max_retries=MAX_RETRIES,
            )
        self._client = client
        logger.info("GPTVerificationJudge initialized (model=%s)", model)

    def _load_data_urls(self, before_ref: str, after_ref: str) -> tuple[str, str]:
        """두 이미지를 가져와 축소/재인코딩합니다 (blocking I/O)."""
        before_url = self._normalizer.to_data_url(self._image_store.fetch(before_ref))
        after_url = self._normalizer.to_data_url(self._image_store.fetch(after_ref))
        return before_url, after_url

    async def judge(self, before_ref: str, after_ref: str, location_hint: str) -> Verdict:
        # 저장소 I/O와 Pillow 재인코딩은 이벤트 루프 밖에서 실행
        loop = asyncio.get_running_loop()
        try:
            before_url, after_url = await loop.run_in_executor(
                None, partial(self._load_data_urls, before_ref, after_ref)
            )
        except InvalidImageError as exc:
            logger.warning("Image could not be decoded", extra={"error": str(exc)})
            return Verdict.fail_closed(f"이미지를 해석할 수 없습니다: {exc}")

        messages = [
            {"role": "system", "content": self._prompt.replace("{location}", location_hint)},
            {
                "role": "user",
                "content": [
                    {
                        "type": "text",
                        "text": f"위치: {location_hint}\n첫 번째는 청소 전, 두 번째는 청소 후 사진입니다.",
                    },
                    {"type": "image_url", "image_url": {"url": before_url, "detail": "low"}},
                    {"type": "image_url", "image_url": {"url": after_url, "detail": "low"}},
                ],
            },
        ]

        logger.debug("Judge call starting (model=%s)", self._model)
        try:
            response = await asyncio.wait_for(
                self._client.chat.completions.create(
                    model=self._model,
                    messages=messages,
                    response_format=JUDGE_RESPONSE_FORMAT,
                    temperature=0,
                    max_tokens=JUDGE_MAX_TOKENS,
                ),
                timeout=self._timeout_seconds,
            )
        except _UNAVAILABLE_ERRORS as exc:
            raise JudgeUnavailableError(type(exc).__name__) from exc
        except openai.APIStatusError as exc:
            if is_retryable_status(exc.status_code):
                raise JudgeUnavailableError(f"HTTP {exc.status_code}") from exc
            logger.error(
                "Judge rejected the request",
                extra={"status_code": exc.status_code, "model": self._model},
            )
            raise JudgeRequestError(exc.status_code, type(exc).__name__) from exc

        return self._parse(response)

    def _parse(self, response: Any) -> Verdict:
        """응답을 Verdict로 변환합니다. 해석 불가능하면 REJECTED."""
        try:
            message = response.choices[0].message
        except (AttributeError, IndexError):
            return Verdict.fail_closed("Judge 응답이 비어 있습니다")

        raw = message.content
        if getattr(message, "refusal", None):
            return Verdict.fail_closed("Judge가 응답을 거부했습니다", raw_output=message.refusal)
        if not raw:
            return Verdict.fail_closed("Judge 응답이 비어 있습니다")

        try:
            output = JudgeOutput.model_validate_json(raw)
        except ValidationError as exc:
            logger.warning(
                "Judge output failed validation",
                extra={"errors": exc.error_count()},
            )
            return Verdict.fail_closed("Judge 응답 형식 오류", raw_output=raw)

        return Verdict(
            result=VerdictResult(output.result),
            confidence=output.confidence,
            rationale=output.reason,
            raw_output=raw,
        )

    async def aclose(self) -> None:
        """HTTP 클라이언트를 닫습니다."""
        await self._client.close()
