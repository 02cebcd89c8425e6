"""Error categories surfaced to users when the reasoning service fails.

The extraction engine never raises on input shape. Everything here concerns
the downstream reasoning call, whose failures are reported as one of four
distinct, human-readable categories instead of a single opaque message.
"""

from __future__ import annotations

import json
import logging
from enum import Enum

import anthropic
import openai
from pydantic import ValidationError

logger = logging.getLogger(__name__)


class ErrorCode(str, Enum):
    """Category of a reasoning-service failure."""

    CREDENTIAL_ERROR = "CREDENTIAL_ERROR"
    QUOTA_EXCEEDED = "QUOTA_EXCEEDED"
    RESPONSE_PARSE_ERROR = "RESPONSE_PARSE_ERROR"
    REASONING_FAILED = "REASONING_FAILED"


class ReasoningError(Exception):
    """Base class for failures of the downstream reasoning collaborator."""

    code: ErrorCode = ErrorCode.REASONING_FAILED
    default_message = "Failed to analyze contract with the reasoning service."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict[str, str]:
        return {"code": self.code.value, "message": self.message}


class CredentialError(ReasoningError):
    code = ErrorCode.CREDENTIAL_ERROR
    default_message = "Invalid API key. Please check your API key and try again."


class QuotaExceededError(ReasoningError):
    code = ErrorCode.QUOTA_EXCEEDED
    default_message = "API quota exceeded. Please check your API usage limits."


class ResponseParseError(ReasoningError):
    code = ErrorCode.RESPONSE_PARSE_ERROR
    default_message = "Failed to parse the reasoning response. The model returned invalid JSON."


class ReasoningFailure(ReasoningError):
    code = ErrorCode.REASONING_FAILED


_CREDENTIAL_EXCEPTIONS = (
    anthropic.AuthenticationError,
    anthropic.PermissionDeniedError,
    openai.AuthenticationError,
    openai.PermissionDeniedError,
)
_PARSE_EXCEPTIONS = (json.JSONDecodeError, ValidationError)


def classify_reasoning_error(exc: BaseException) -> ReasoningError:
    """Map an arbitrary exception from the reasoning call to its category.

    SDK exception types are checked first, then the message text, matching
    how the service reports key and quota problems in plain errors.
    """
    if isinstance(exc, ReasoningError):
        return exc

    message = str(exc)
    lowered = message.lower()

    if isinstance(exc, _CREDENTIAL_EXCEPTIONS) or "api key" in lowered or "api_key" in lowered:
        return CredentialError()
    if "quota" in lowered or "insufficient_quota" in lowered:
        return QuotaExceededError()
    if isinstance(exc, _PARSE_EXCEPTIONS) or "json" in lowered:
        return ResponseParseError()

    logger.debug("Unclassified reasoning error: %r", exc)
    if message:
        return ReasoningFailure(f"Reasoning service error: {message}")
    return ReasoningFailure()
