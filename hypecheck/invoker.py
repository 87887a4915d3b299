"""ResilientInvoker — runs one analysis request with bounded retry.

Each call to :meth:`ResilientInvoker.invoke` is independent: the retry state
lives on the stack of that call, so one invoker can serve concurrent
analyses. Only transient overload and empty bodies are retried; the waits
grow as ``base_backoff * 2 ** (attempt - 1)``. A body that does not decode
is treated as deterministic for the input and surfaced immediately.
"""
import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from hypecheck.backends.client import ModelBackend
from hypecheck.constants import (
    BASE_BACKOFF_SECONDS,
    MAX_ATTEMPTS,
    MISSING_KEY_MARKER,
    MSG_ANALYSIS_FAILED_LOG,
    MSG_ANALYZING,
    MSG_EMPTY_RETRYING,
    MSG_NO_MODEL_RESPONSE,
    MSG_RETRYING,
)
from hypecheck.errors import (
    AnalysisError,
    ErrorKind,
    MissingCredentialError,
    ResponseUnparseableError,
    classify_error,
)
from hypecheck.models import AnalysisResult, MediaType, ModelRequest, result_from_dict
from hypecheck.request_builder import build_request

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


class EmptyResponseError(AnalysisError):
    """The backend answered without a usable body."""


@dataclass
class RetryState:
    attempt: int = 1
    last_error: Optional[BaseException] = None
    backoff: float = 0.0


def backoff_for(attempt: int, base: float = BASE_BACKOFF_SECONDS) -> float:
    return base * 2 ** (attempt - 1)


def decode_result(body: str, media_type: MediaType) -> AnalysisResult:
    try:
        return result_from_dict(json.loads(body), media_type)
    except (json.JSONDecodeError, ValueError, TypeError, OverflowError) as exc:
        raise ResponseUnparseableError(f"Could not parse model response: {exc}", cause=exc) from exc


class ResilientInvoker:

    def __init__(
        self,
        backend: Optional[ModelBackend],
        max_attempts: int = MAX_ATTEMPTS,
        base_backoff: float = BASE_BACKOFF_SECONDS,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self._backend = backend
        self._max_attempts = max_attempts
        self._base_backoff = base_backoff
        self._sleep = sleep

    @property
    def backend(self) -> Optional[ModelBackend]:
        return self._backend

    def has_credential(self) -> bool:
        return self._backend is not None and bool(self._backend.api_key)

    async def invoke(self, request: ModelRequest) -> AnalysisResult:
        """Run the request, retrying overloads; raise a classified AnalysisError on failure."""
        match self.has_credential():
            case False:
                raise MissingCredentialError(MISSING_KEY_MARKER)
            case True:
                pass

        backend = self._backend
        logger.info(
            MSG_ANALYZING, request.media_type.value, len(request.media.data), backend.name
        )
        state = RetryState()
        while state.attempt <= self._max_attempts:
            try:
                body = await backend.generate(request)
            except Exception as exc:
                state.last_error = exc
                retryable = classify_error(exc) is ErrorKind.TRANSIENT_OVERLOAD
                message = MSG_RETRYING
            else:
                match (body or "").strip():
                    case "":
                        state.last_error = EmptyResponseError(MSG_NO_MODEL_RESPONSE)
                        retryable = True
                        message = MSG_EMPTY_RETRYING
                    case text:
                        return decode_result(text, request.media_type)

            match (retryable, state.attempt < self._max_attempts):
                case (True, True):
                    state.backoff = backoff_for(state.attempt, self._base_backoff)
                    logger.warning(message, state.backoff, state.attempt, self._max_attempts)
                    await self._sleep(state.backoff)
                    state.attempt += 1
                case _:
                    break

        logger.error(MSG_ANALYSIS_FAILED_LOG, state.attempt, state.last_error)
        error = AnalysisError.from_exception(state.last_error)
        match error is state.last_error:
            case True:
                raise error
            case False:
                raise error from state.last_error


async def analyze_content(
    invoker: ResilientInvoker,
    media_payload: bytes,
    mime_type: str,
    caption: str | None,
    trend_context: str | None,
    media_type: MediaType | str | None,
    target_region: str | None,
) -> AnalysisResult:
    """Build and run one analysis; the inbound entry point for callers."""
    request = build_request(
        media_payload, mime_type, caption, trend_context, media_type, target_region
    )
    return await invoker.invoke(request)
