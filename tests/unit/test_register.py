from __future__ import annotations

from gradium_client.stream.register import ErrorRegister
from gradium_client.errors import ProtocolError, ConnectionFailedError


def test_register_keeps_first_error() -> None:
    errors = ErrorRegister()
    assert errors.get() is None

    first = ProtocolError("bad voice", code=400)
    assert errors.set_if_absent(first) is True
    assert errors.set_if_absent(ConnectionFailedError("read error")) is False
    assert errors.get() is first
