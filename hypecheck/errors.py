"""Classified analysis failures and their user-facing messages."""
import re
from enum import Enum
from typing import Optional

from hypecheck.constants import (
    INVALID_MARKERS,
    INVALID_STATUS_CODES,
    MISSING_KEY_MARKER,
    MSG_ERR_INVALID,
    MSG_ERR_MISSING_KEY,
    MSG_ERR_OVERLOADED,
    MSG_ERR_UNKNOWN_PREFIX,
    MSG_ERR_UNPARSEABLE,
    OVERLOAD_MARKERS,
    OVERLOAD_STATUS_CODES,
)


class ErrorKind(str, Enum):
    MISSING_CREDENTIAL = "missing-credential"
    TRANSIENT_OVERLOAD = "transient-overload"
    INVALID_REQUEST = "invalid-request"
    RESPONSE_UNPARSEABLE = "response-unparseable"
    UNKNOWN = "unknown"


class AnalysisError(Exception):
    kind: ErrorKind = ErrorKind.UNKNOWN

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause

    @classmethod
    def from_exception(cls, exc: BaseException) -> "AnalysisError":
        """Wrap any failure in the AnalysisError subclass matching its kind."""
        match exc:
            case AnalysisError():
                return exc
            case _:
                error_cls = _ERRORS_BY_KIND[classify_error(exc)]
                return error_cls(_message_of(exc), cause=exc)


class MissingCredentialError(AnalysisError):
    kind = ErrorKind.MISSING_CREDENTIAL


class TransientOverloadError(AnalysisError):
    kind = ErrorKind.TRANSIENT_OVERLOAD


class InvalidRequestError(AnalysisError):
    kind = ErrorKind.INVALID_REQUEST


class UnsupportedMediaError(InvalidRequestError):
    pass


class ResponseUnparseableError(AnalysisError):
    kind = ErrorKind.RESPONSE_UNPARSEABLE


_ERRORS_BY_KIND: dict[ErrorKind, type[AnalysisError]] = {
    ErrorKind.MISSING_CREDENTIAL: MissingCredentialError,
    ErrorKind.TRANSIENT_OVERLOAD: TransientOverloadError,
    ErrorKind.INVALID_REQUEST: InvalidRequestError,
    ErrorKind.RESPONSE_UNPARSEABLE: ResponseUnparseableError,
    ErrorKind.UNKNOWN: AnalysisError,
}


def _message_of(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


def _mentions(message: str, markers: tuple[str, ...], codes: tuple[int, ...]) -> bool:
    status = re.compile(r"\b(" + "|".join(map(str, codes)) + r")\b")
    return any(marker in message for marker in markers) or status.search(message) is not None


def _status_of(exc: BaseException) -> Optional[int]:
    # google-genai APIError exposes .code, openai/anthropic APIStatusError .status_code
    for attr in ("code", "status_code"):
        match getattr(exc, attr, None):
            case int() as status:
                return status
            case _:
                pass
    return None


def classify_error(exc: BaseException) -> ErrorKind:
    """Derive an ErrorKind from a typed status when present, else from the message text."""
    match exc:
        case AnalysisError():
            return exc.kind
        case _:
            pass

    match _status_of(exc):
        case status if status in OVERLOAD_STATUS_CODES:
            return ErrorKind.TRANSIENT_OVERLOAD
        case status if status in INVALID_STATUS_CODES:
            return ErrorKind.INVALID_REQUEST
        case _:
            pass

    message = _message_of(exc)
    match message:
        case m if MISSING_KEY_MARKER in m:
            return ErrorKind.MISSING_CREDENTIAL
        case m if _mentions(m, OVERLOAD_MARKERS, OVERLOAD_STATUS_CODES):
            return ErrorKind.TRANSIENT_OVERLOAD
        case m if _mentions(m, INVALID_MARKERS, INVALID_STATUS_CODES):
            return ErrorKind.INVALID_REQUEST
        case _:
            return ErrorKind.UNKNOWN


def user_message(error: BaseException) -> str:
    """Map a failure to the message shown to the user."""
    match classify_error(error):
        case ErrorKind.MISSING_CREDENTIAL:
            return MSG_ERR_MISSING_KEY
        case ErrorKind.TRANSIENT_OVERLOAD:
            return MSG_ERR_OVERLOADED
        case ErrorKind.INVALID_REQUEST if isinstance(error, UnsupportedMediaError):
            return str(error)
        case ErrorKind.INVALID_REQUEST:
            return MSG_ERR_INVALID
        case ErrorKind.RESPONSE_UNPARSEABLE:
            return MSG_ERR_UNPARSEABLE
        case _:
            return MSG_ERR_UNKNOWN_PREFIX + _message_of(error)
