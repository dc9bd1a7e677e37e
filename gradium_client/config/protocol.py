"""Wire protocol constants for the speech WebSocket."""

from __future__ import annotations

KEY_TYPE = "type"

# Outbound message types
MSG_SETUP = "setup"
MSG_TEXT = "text"
MSG_AUDIO = "audio"
MSG_END_OF_STREAM = "end_of_stream"

# Inbound message types (``audio``, ``text`` and ``end_of_stream`` are shared)
MSG_READY = "ready"
MSG_STEP = "step"
MSG_END_TEXT = "end_text"
MSG_ERROR = "error"

# Sub-paths appended to the speech WebSocket URL
TTS_PATH = "/tts"
STT_PATH = "/stt"

AUTH_HEADER = "x-api-key"

__all__ = [
    "AUTH_HEADER",
    "KEY_TYPE",
    "MSG_AUDIO",
    "MSG_END_OF_STREAM",
    "MSG_END_TEXT",
    "MSG_ERROR",
    "MSG_READY",
    "MSG_SETUP",
    "MSG_STEP",
    "MSG_TEXT",
    "STT_PATH",
    "TTS_PATH",
]
