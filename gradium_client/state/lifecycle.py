"""Session lifecycle states."""

from __future__ import annotations

from enum import Enum


class SessionState(Enum):
    CONNECTING = "connecting"
    AWAITING_READY = "awaiting_ready"
    STREAMING = "streaming"
    TERMINATED = "terminated"


class TerminationReason(Enum):
    END_OF_STREAM = "end_of_stream"
    ERROR = "error"
    CONNECTION_CLOSED = "connection_closed"


__all__ = ["SessionState", "TerminationReason"]
