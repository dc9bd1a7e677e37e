"""Shared error types for the Gradium client."""

from __future__ import annotations

from typing import Any
from collections.abc import Mapping
from dataclasses import field, dataclass

import orjson


@dataclass(eq=False)
class GradiumError(Exception):
    """Base class for every error raised by the client."""

    message: str = ""

    def __str__(self) -> str:
        return self.message


@dataclass(eq=False)
class ConnectionFailedError(GradiumError):
    """The duplex connection or HTTP transport could not be used."""

    def __str__(self) -> str:
        return self.message or "failed to connect to the API"


@dataclass(eq=False)
class ProtocolError(GradiumError):
    """The server reported a structured error on the stream."""

    code: int = 0

    def __str__(self) -> str:
        if self.code:
            return f"stream error ({self.code}): {self.message}"
        return f"stream error: {self.message}"


@dataclass(eq=False)
class DeadlineExceededError(GradiumError, TimeoutError):
    """A caller-side deadline elapsed; the session itself is unaffected."""

    def __str__(self) -> str:
        return self.message or "deadline exceeded"


@dataclass(eq=False)
class MalformedFrameError(GradiumError):
    """An inbound frame had a known type but an unusable payload."""

    msg_type: str = ""


@dataclass(eq=False)
class AuthenticationError(GradiumError):
    def __str__(self) -> str:
        return self.message or "invalid or missing API key"


@dataclass(frozen=True, slots=True)
class ValidationErrorDetail:
    loc: list[Any]
    msg: str
    type: str


@dataclass(eq=False)
class ValidationError(GradiumError):
    status: int = 422
    errors: list[ValidationErrorDetail] = field(default_factory=list)

    def __str__(self) -> str:
        if not self.errors:
            return "validation error"
        return "validation error: " + "; ".join(err.msg for err in self.errors)


@dataclass(eq=False)
class NotFoundError(GradiumError):
    def __str__(self) -> str:
        return self.message or "resource not found"


@dataclass(eq=False)
class RateLimitError(GradiumError):
    retry_after: int = 0

    def __str__(self) -> str:
        return self.message or "rate limit exceeded"


@dataclass(eq=False)
class InternalServerError(GradiumError):
    status: int = 500

    def __str__(self) -> str:
        return self.message or f"internal server error ({self.status})"


@dataclass(eq=False)
class APIError(GradiumError):
    status: int = 0
    body: bytes = b""

    def __str__(self) -> str:
        return f"API error ({self.status}): {self.message}"


@dataclass(eq=False)
class RequestTimeoutError(GradiumError, TimeoutError):
    def __str__(self) -> str:
        return self.message or "request timed out"


def _parse_body(body: bytes) -> Any:
    try:
        return orjson.loads(body) if body else None
    except orjson.JSONDecodeError:
        return None


def _validation_details(detail: Any) -> list[ValidationErrorDetail] | None:
    if not isinstance(detail, list):
        return None
    out: list[ValidationErrorDetail] = []
    for item in detail:
        if not isinstance(item, dict):
            return None
        out.append(
            ValidationErrorDetail(
                loc=list(item.get("loc") or []),
                msg=str(item.get("msg") or ""),
                type=str(item.get("type") or ""),
            )
        )
    return out


def error_from_response(status: int, body: bytes, headers: Mapping[str, str] | None = None) -> GradiumError:
    """Map a non-success HTTP response to the matching error type."""
    parsed = _parse_body(body)
    detail = parsed.get("detail") if isinstance(parsed, dict) else None
    message = detail if isinstance(detail, str) else body.decode("utf-8", errors="replace")

    if status == 422:
        return ValidationError(status=422, errors=_validation_details(detail) or [])
    if status in {401, 403}:
        return AuthenticationError(message)
    if status == 404:
        return NotFoundError(message)
    if status == 429:
        retry_after = 0
        raw = (headers or {}).get("retry-after") or (headers or {}).get("Retry-After")
        if raw:
            try:
                retry_after = int(raw)
            except ValueError:
                retry_after = 0
        return RateLimitError(message, retry_after=retry_after)
    if status >= 500:
        return InternalServerError(message, status=status)
    return APIError(message, status=status, body=body)


__all__ = [
    "APIError",
    "AuthenticationError",
    "ConnectionFailedError",
    "DeadlineExceededError",
    "GradiumError",
    "InternalServerError",
    "MalformedFrameError",
    "NotFoundError",
    "ProtocolError",
    "RateLimitError",
    "RequestTimeoutError",
    "ValidationError",
    "ValidationErrorDetail",
    "error_from_response",
]
