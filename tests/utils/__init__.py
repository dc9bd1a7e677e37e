"""Test doubles and frame builders.

- fakes.py: in-memory duplex connection and connector
- frames.py: server frame builders
"""

from __future__ import annotations

from .fakes import FakeConnector, FakeConnection
from .frames import (
    step_frame,
    text_frame,
    audio_frame,
    error_frame,
    ready_frame,
    end_text_frame,
    end_of_stream_frame,
)

__all__ = [
    "FakeConnection",
    "FakeConnector",
    "audio_frame",
    "end_of_stream_frame",
    "end_text_frame",
    "error_frame",
    "ready_frame",
    "step_frame",
    "text_frame",
]
