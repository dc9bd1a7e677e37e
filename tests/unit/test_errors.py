from __future__ import annotations

import pytest

from gradium_client.errors import (
    APIError,
    NotFoundError,
    ProtocolError,
    RateLimitError,
    ValidationError,
    AuthenticationError,
    InternalServerError,
    DeadlineExceededError,
    error_from_response,
)


def test_validation_error_details() -> None:
    body = b'{"detail": [{"loc": ["body", "name"], "msg": "field required", "type": "value_error.missing"}]}'
    err = error_from_response(422, body)
    assert isinstance(err, ValidationError)
    assert err.errors[0].loc == ["body", "name"]
    assert str(err) == "validation error: field required"


@pytest.mark.parametrize("status", [401, 403])
def test_auth_errors(status: int) -> None:
    err = error_from_response(status, b'{"detail": "Invalid API key"}')
    assert isinstance(err, AuthenticationError)
    assert str(err) == "Invalid API key"


def test_not_found() -> None:
    assert isinstance(error_from_response(404, b""), NotFoundError)


def test_rate_limit_reads_retry_after() -> None:
    err = error_from_response(429, b'{"detail": "slow down"}', {"retry-after": "12"})
    assert isinstance(err, RateLimitError)
    assert err.retry_after == 12


def test_server_errors() -> None:
    err = error_from_response(503, b"upstream unavailable")
    assert isinstance(err, InternalServerError)
    assert err.status == 503
    assert err.message == "upstream unavailable"


def test_other_statuses_keep_the_body() -> None:
    err = error_from_response(418, b"teapot")
    assert isinstance(err, APIError)
    assert err.status == 418
    assert err.body == b"teapot"
    assert str(err) == "API error (418): teapot"


def test_stream_error_formatting() -> None:
    assert str(ProtocolError("Invalid voice ID", code=400)) == "stream error (400): Invalid voice ID"
    assert str(ProtocolError("oops")) == "stream error: oops"


def test_deadline_is_a_timeout() -> None:
    assert isinstance(DeadlineExceededError(), TimeoutError)
    assert str(DeadlineExceededError()) == "deadline exceeded"
