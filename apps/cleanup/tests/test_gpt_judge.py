"""GPTVerificationJudge 단위 테스트 (OpenAI 클라이언트 mock)."""

from __future__ import annotations

import asyncio
import io
import json
import threading
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import openai
import pytest
from PIL import Image

from apps.cleanup.application.common.exceptions import ImageNotFoundError, ImageStorageError
from apps.cleanup.application.verification.exceptions import (
    JudgeRequestError,
    JudgeUnavailableError,
)
from apps.cleanup.domain.enums import VerdictResult
from apps.cleanup.infrastructure.llm.gpt import GPTVerificationJudge
from apps.cleanup.infrastructure.llm.gpt.judge import JUDGE_RESPONSE_FORMAT
from apps.cleanup.infrastructure.storage import ImageNormalizer

pytestmark = pytest.mark.asyncio

PROMPT = "위치: {location}\n청소 여부를 판단하세요."
_REQUEST = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")


def _status_error(cls: type[openai.APIStatusError], status_code: int) -> openai.APIStatusError:
    response = httpx.Response(status_code, request=_REQUEST)
    return cls(f"HTTP {status_code}", response=response, body=None)


def _png(size: tuple[int, int] = (64, 48)) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", size, color=(120, 180, 90)).save(buf, format="PNG")
    return buf.getvalue()


def _response(content: str | None, refusal: str | None = None) -> SimpleNamespace:
    message = SimpleNamespace(content=content, refusal=refusal)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def mock_client() -> MagicMock:
    client = MagicMock()
    client.chat.completions.create = AsyncMock()
    client.close = AsyncMock()
    return client


@pytest.fixture
def refs(image_store) -> tuple[str, str]:
    return image_store.store(_png()), image_store.store(_png((2000, 1000)))


@pytest.fixture
def gpt_judge(image_store, mock_client) -> GPTVerificationJudge:
    return GPTVerificationJudge(
        image_store=image_store,
        prompt=PROMPT,
        model="gpt-4o-mini",
        timeout_seconds=5.0,
        client=mock_client,
    )


class TestStructuredOutput:
    async def test_approved(self, gpt_judge, mock_client, refs) -> None:
        raw = json.dumps({"result": "APPROVED", "confidence": 0.92, "reason": "쓰레기가 사라짐"})
        mock_client.chat.completions.create.return_value = _response(raw)

        verdict = await gpt_judge.judge(*refs, "공원 입구")

        assert verdict.result == VerdictResult.APPROVED
        assert verdict.confidence == 0.92
        assert verdict.rationale == "쓰레기가 사라짐"
        assert verdict.raw_output == raw

    async def test_request_shape(self, gpt_judge, mock_client, refs) -> None:
        mock_client.chat.completions.create.return_value = _response(
            json.dumps({"result": "REJECTED", "confidence": 0.3, "reason": "남아 있음"})
        )

        await gpt_judge.judge(*refs, "공원 입구")

        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-4o-mini"
        assert kwargs["temperature"] == 0
        assert kwargs["response_format"] == JUDGE_RESPONSE_FORMAT
        system, user = kwargs["messages"]
        assert "공원 입구" in system["content"]
        assert "{location}" not in system["content"]
        images = [part for part in user["content"] if part["type"] == "image_url"]
        assert len(images) == 2
        assert all(p["image_url"]["url"].startswith("data:image/jpeg;base64,") for p in images)


class TestFailClosed:
    @pytest.mark.parametrize(
        "raw",
        [
            "not json",
            json.dumps({"result": "MAYBE", "confidence": 0.9, "reason": "?"}),
            json.dumps({"result": "APPROVED", "confidence": 1.5, "reason": "x"}),
            json.dumps({"result": "APPROVED", "confidence": 0.9}),
            json.dumps({"result": "APPROVED", "confidence": 0.9, "reason": "x", "extra": 1}),
            "",
        ],
    )
    async def test_malformed_output_is_rejected(self, gpt_judge, mock_client, refs, raw) -> None:
        mock_client.chat.completions.create.return_value = _response(raw)

        verdict = await gpt_judge.judge(*refs, "공원 입구")

        assert verdict.result == VerdictResult.REJECTED
        assert verdict.confidence is None

    async def test_refusal_is_rejected(self, gpt_judge, mock_client, refs) -> None:
        mock_client.chat.completions.create.return_value = _response(None, refusal="cannot help")

        verdict = await gpt_judge.judge(*refs, "공원 입구")

        assert verdict.result == VerdictResult.REJECTED
        assert verdict.raw_output == "cannot help"

    async def test_empty_choices(self, gpt_judge, mock_client, refs) -> None:
        mock_client.chat.completions.create.return_value = SimpleNamespace(choices=[])

        verdict = await gpt_judge.judge(*refs, "공원 입구")

        assert verdict.result == VerdictResult.REJECTED

    async def test_undecodable_image_skips_call(
        self, gpt_judge, mock_client, image_store, refs
    ) -> None:
        broken = image_store.store(b"definitely not an image")

        verdict = await gpt_judge.judge(refs[0], broken, "공원 입구")

        assert verdict.result == VerdictResult.REJECTED
        mock_client.chat.completions.create.assert_not_called()


class TestUnavailable:
    @pytest.mark.parametrize(
        "error",
        [
            openai.APIConnectionError(request=_REQUEST),
            httpx.ReadTimeout("read timed out"),
            asyncio.TimeoutError(),
            _status_error(openai.RateLimitError, 429),
            _status_error(openai.InternalServerError, 500),
            _status_error(openai.InternalServerError, 503),
            _status_error(openai.APIStatusError, 408),
            _status_error(openai.ConflictError, 409),
        ],
    )
    async def test_transport_errors(self, gpt_judge, mock_client, refs, error) -> None:
        mock_client.chat.completions.create.side_effect = error

        with pytest.raises(JudgeUnavailableError):
            await gpt_judge.judge(*refs, "공원 입구")

    async def test_missing_image_propagates(self, gpt_judge, mock_client, refs) -> None:
        with pytest.raises(ImageNotFoundError):
            await gpt_judge.judge(refs[0], "img/missing.jpg", "공원 입구")
        mock_client.chat.completions.create.assert_not_called()

    async def test_storage_failure_propagates(
        self, gpt_judge, mock_client, image_store, refs
    ) -> None:
        image_store.fail_on_fetch = ImageStorageError("connection reset")

        with pytest.raises(ImageStorageError):
            await gpt_judge.judge(*refs, "공원 입구")
        mock_client.chat.completions.create.assert_not_called()

    async def test_aclose(self, gpt_judge, mock_client) -> None:
        await gpt_judge.aclose()
        mock_client.close.assert_awaited_once()


class TestRequestRejected:
    @pytest.mark.parametrize(
        ("error", "status_code"),
        [
            (_status_error(openai.BadRequestError, 400), 400),
            (_status_error(openai.AuthenticationError, 401), 401),
            (_status_error(openai.PermissionDeniedError, 403), 403),
            (_status_error(openai.NotFoundError, 404), 404),
            (_status_error(openai.UnprocessableEntityError, 422), 422),
        ],
    )
    async def test_client_errors_are_not_retryable(
        self, gpt_judge, mock_client, refs, error, status_code
    ) -> None:
        mock_client.chat.completions.create.side_effect = error

        with pytest.raises(JudgeRequestError) as exc_info:
            await gpt_judge.judge(*refs, "공원 입구")

        assert exc_info.value.status_code == status_code


async def test_image_loading_runs_off_event_loop(gpt_judge, mock_client, image_store, refs) -> None:
    mock_client.chat.completions.create.return_value = _response(
        json.dumps({"result": "APPROVED", "confidence": 0.9, "reason": "ok"})
    )
    image_store.threads.clear()

    await gpt_judge.judge(*refs, "공원 입구")

    assert image_store.threads
    assert threading.get_ident() not in image_store.threads


async def test_normalizer_downscales_long_side() -> None:
    normalized = ImageNormalizer(max_side=512).normalize(_png((2000, 1000)))

    with Image.open(io.BytesIO(normalized)) as img:
        assert img.format == "JPEG"
        assert max(img.size) == 512
