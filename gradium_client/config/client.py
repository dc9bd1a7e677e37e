"""Endpoint and credential configuration (env names and defaults only)."""

from __future__ import annotations

ENV_GRADIUM_API_KEY = "GRADIUM_API_KEY"
ENV_GRADIUM_REGION = "GRADIUM_REGION"
ENV_GRADIUM_BASE_URL = "GRADIUM_BASE_URL"
ENV_GRADIUM_TIMEOUT_S = "GRADIUM_TIMEOUT_S"
ENV_GRADIUM_WS_OPEN_TIMEOUT_S = "GRADIUM_WS_OPEN_TIMEOUT_S"

REGION_EU = "eu"
REGION_US = "us"
DEFAULT_REGION = REGION_EU

API_URLS: dict[str, str] = {
    REGION_EU: "https://eu.api.gradium.ai/api",
    REGION_US: "https://us.api.gradium.ai/api",
}

WS_URLS: dict[str, str] = {
    REGION_EU: "wss://eu.api.gradium.ai/api/speech",
    REGION_US: "wss://us.api.gradium.ai/api/speech",
}

WS_SPEECH_SUFFIX = "/speech"

DEFAULT_TIMEOUT_S = 30.0
DEFAULT_WS_OPEN_TIMEOUT_S = 10.0

# Audio payloads can be large; keep the frame limit generous.
WS_MAX_MESSAGE_BYTES: int = 32 * 1024 * 1024

__all__ = [
    "API_URLS",
    "DEFAULT_REGION",
    "DEFAULT_TIMEOUT_S",
    "DEFAULT_WS_OPEN_TIMEOUT_S",
    "ENV_GRADIUM_API_KEY",
    "ENV_GRADIUM_BASE_URL",
    "ENV_GRADIUM_REGION",
    "ENV_GRADIUM_TIMEOUT_S",
    "ENV_GRADIUM_WS_OPEN_TIMEOUT_S",
    "REGION_EU",
    "REGION_US",
    "WS_MAX_MESSAGE_BYTES",
    "WS_SPEECH_SUFFIX",
    "WS_URLS",
]
