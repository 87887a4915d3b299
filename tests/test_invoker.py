"""TDD: ResilientInvoker tests written FIRST"""
import json

import pytest
from unittest.mock import AsyncMock, MagicMock

from hypecheck.backends.client import ModelBackend
from hypecheck.errors import (
    AnalysisError,
    ErrorKind,
    InvalidRequestError,
    MissingCredentialError,
    ResponseUnparseableError,
    TransientOverloadError,
)
from hypecheck.invoker import ResilientInvoker, analyze_content, backoff_for
from hypecheck.models import MediaType, VideoAnalysisResult
from hypecheck.request_builder import build_request


def make_backend(*, side_effect=None, return_value=None, api_key="test-key") -> MagicMock:
    backend = MagicMock(spec=ModelBackend)
    backend.name = "Fake"
    backend.api_key = api_key
    backend.generate = AsyncMock(side_effect=side_effect, return_value=return_value)
    return backend


def make_request(media_type: MediaType = MediaType.IMAGE):
    mime = {"image": "image/png", "video": "video/mp4", "audio": "audio/mpeg"}[media_type.value]
    return build_request(b"media", mime, "caption", "trends", media_type, "India")


@pytest.fixture
def sleep() -> AsyncMock:
    return AsyncMock()


# ── backoff ───────────────────────────────────────────────────────────────────


def test_backoff_doubles_from_two_seconds():
    assert [backoff_for(n) for n in (1, 2, 3)] == [2.0, 4.0, 8.0]


# ── success ───────────────────────────────────────────────────────────────────


async def test_success_on_first_attempt(image_payload, sleep):
    backend = make_backend(return_value=json.dumps(image_payload))
    invoker = ResilientInvoker(backend, sleep=sleep)

    result = await invoker.invoke(make_request())

    assert result.score == 72
    backend.generate.assert_awaited_once()
    sleep.assert_not_called()


async def test_overloaded_twice_then_success(image_payload, sleep):
    """Three attempts with waits of 2 s then 4 s, returning the third response."""
    backend = make_backend(
        side_effect=[
            RuntimeError("503 UNAVAILABLE: The model is overloaded."),
            RuntimeError("The model is overloaded. Please try again later."),
            json.dumps(image_payload),
        ]
    )
    invoker = ResilientInvoker(backend, sleep=sleep)

    result = await invoker.invoke(make_request())

    assert result.score == 72
    assert backend.generate.await_count == 3
    assert [c.args[0] for c in sleep.await_args_list] == [2.0, 4.0]


async def test_always_overloaded_stops_after_three_attempts(sleep):
    backend = make_backend(side_effect=RuntimeError("503 UNAVAILABLE"))
    invoker = ResilientInvoker(backend, sleep=sleep)

    with pytest.raises(TransientOverloadError) as exc_info:
        await invoker.invoke(make_request())

    assert exc_info.value.kind is ErrorKind.TRANSIENT_OVERLOAD
    assert backend.generate.await_count == 3
    assert sleep.await_count == 2


async def test_empty_body_is_retried(image_payload, sleep):
    backend = make_backend(side_effect=[None, "   ", json.dumps(image_payload)])
    invoker = ResilientInvoker(backend, sleep=sleep)

    result = await invoker.invoke(make_request())

    assert result.score == 72
    assert backend.generate.await_count == 3


async def test_empty_body_every_time_surfaces_unknown(sleep):
    backend = make_backend(return_value=None)
    invoker = ResilientInvoker(backend, sleep=sleep)

    with pytest.raises(AnalysisError) as exc_info:
        await invoker.invoke(make_request())

    assert exc_info.value.kind is ErrorKind.UNKNOWN
    assert backend.generate.await_count == 3


# ── terminal failures ─────────────────────────────────────────────────────────


async def test_non_json_body_fails_without_retry(sleep):
    backend = make_backend(return_value="Sure! Here is your analysis: great meme")
    invoker = ResilientInvoker(backend, sleep=sleep)

    with pytest.raises(ResponseUnparseableError):
        await invoker.invoke(make_request())

    backend.generate.assert_awaited_once()
    sleep.assert_not_called()


async def test_json_array_body_is_unparseable(sleep):
    backend = make_backend(return_value="[1, 2, 3]")
    invoker = ResilientInvoker(backend, sleep=sleep)

    with pytest.raises(ResponseUnparseableError):
        await invoker.invoke(make_request())


@pytest.mark.parametrize(
    "body",
    [
        '{"score": Infinity}',
        '{"score": 1e999}',
        '{"score": 70, "platform_predictions": [{"platformName": "TikTok", "probability": -Infinity}]}',
    ],
)
async def test_non_finite_number_is_unparseable(body, sleep):
    backend = make_backend(return_value=body)
    invoker = ResilientInvoker(backend, sleep=sleep)

    with pytest.raises(ResponseUnparseableError):
        await invoker.invoke(make_request())

    backend.generate.assert_awaited_once()
    sleep.assert_not_called()


async def test_invalid_key_is_not_retried(sleep):
    backend = make_backend(side_effect=RuntimeError("400 API key not valid"))
    invoker = ResilientInvoker(backend, sleep=sleep)

    with pytest.raises(InvalidRequestError) as exc_info:
        await invoker.invoke(make_request())

    backend.generate.assert_awaited_once()
    assert isinstance(exc_info.value.cause, RuntimeError)


async def test_unknown_error_passes_message_through(sleep):
    backend = make_backend(side_effect=ConnectionError("socket closed"))
    invoker = ResilientInvoker(backend, sleep=sleep)

    with pytest.raises(AnalysisError, match="socket closed") as exc_info:
        await invoker.invoke(make_request())

    assert exc_info.value.kind is ErrorKind.UNKNOWN
    backend.generate.assert_awaited_once()


async def test_missing_credential_fails_fast_without_network(sleep):
    backend = make_backend(api_key=None)
    invoker = ResilientInvoker(backend, sleep=sleep)

    with pytest.raises(MissingCredentialError):
        await invoker.invoke(make_request())

    backend.generate.assert_not_called()


async def test_no_backend_is_missing_credential():
    with pytest.raises(MissingCredentialError):
        await ResilientInvoker(None).invoke(make_request())


# ── entry point ───────────────────────────────────────────────────────────────


async def test_analyze_content_builds_request_for_video(video_payload, sleep):
    backend = make_backend(return_value=json.dumps(video_payload))
    invoker = ResilientInvoker(backend, sleep=sleep)

    result = await analyze_content(
        invoker, b"clip", "video/mp4", "caption", "", "video", "Germany"
    )

    assert isinstance(result, VideoAnalysisResult)
    sent = backend.generate.await_args.args[0]
    assert sent.media.data == b"clip"
    assert "Germany" in sent.prompt
    assert "attention_drops" in sent.prompt
