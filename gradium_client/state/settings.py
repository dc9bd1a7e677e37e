"""Client settings (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass

from gradium_client.config.streaming import AUDIO_CHANNEL_CAPACITY, RESULT_CHANNEL_CAPACITY


@dataclass(frozen=True, slots=True)
class ClientSettings:
    api_key: str
    region: str
    base_url: str
    ws_url: str
    timeout_s: float
    ws_open_timeout_s: float


@dataclass(frozen=True, slots=True)
class ChannelCapacities:
    audio: int = AUDIO_CHANNEL_CAPACITY
    text: int = RESULT_CHANNEL_CAPACITY
    step: int = RESULT_CHANNEL_CAPACITY
    end_text: int = RESULT_CHANNEL_CAPACITY
    unified: int = RESULT_CHANNEL_CAPACITY


__all__ = ["ChannelCapacities", "ClientSettings"]
