"""Streaming session defaults (env-resolved constants only)."""

from __future__ import annotations

import os

DEFAULT_MODEL_NAME = "default"

# The service emits 48kHz audio unless the output format says otherwise.
TTS_DEFAULT_SAMPLE_RATE_HZ: int = 48000

# 1920 samples = 80ms at 24kHz, 2 bytes per sample.
STT_CHUNK_SAMPLES: int = 1920
STT_CHUNK_BYTES: int = STT_CHUNK_SAMPLES * 2

# Result channel capacities. Publishing into a full channel drops the new item.
ENV_AUDIO_CHANNEL_CAPACITY = "GRADIUM_AUDIO_CHANNEL_CAPACITY"
ENV_RESULT_CHANNEL_CAPACITY = "GRADIUM_RESULT_CHANNEL_CAPACITY"
DEFAULT_AUDIO_CHANNEL_CAPACITY = 100
DEFAULT_RESULT_CHANNEL_CAPACITY = 100


def _capacity_env(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    try:
        value = int(raw) if raw else default
    except ValueError:
        value = default
    return max(1, value)


AUDIO_CHANNEL_CAPACITY: int = _capacity_env(ENV_AUDIO_CHANNEL_CAPACITY, DEFAULT_AUDIO_CHANNEL_CAPACITY)
RESULT_CHANNEL_CAPACITY: int = _capacity_env(ENV_RESULT_CHANNEL_CAPACITY, DEFAULT_RESULT_CHANNEL_CAPACITY)

__all__ = [
    "AUDIO_CHANNEL_CAPACITY",
    "DEFAULT_AUDIO_CHANNEL_CAPACITY",
    "DEFAULT_MODEL_NAME",
    "DEFAULT_RESULT_CHANNEL_CAPACITY",
    "ENV_AUDIO_CHANNEL_CAPACITY",
    "ENV_RESULT_CHANNEL_CAPACITY",
    "RESULT_CHANNEL_CAPACITY",
    "STT_CHUNK_BYTES",
    "STT_CHUNK_SAMPLES",
    "TTS_DEFAULT_SAMPLE_RATE_HZ",
]
