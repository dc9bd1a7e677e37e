"""Environment parsing for client settings."""

from __future__ import annotations

import os

from gradium_client.errors import AuthenticationError
from gradium_client.state.settings import ClientSettings
from gradium_client.config.client import (
    API_URLS,
    WS_URLS,
    DEFAULT_REGION,
    WS_SPEECH_SUFFIX,
    DEFAULT_TIMEOUT_S,
    ENV_GRADIUM_REGION,
    ENV_GRADIUM_API_KEY,
    ENV_GRADIUM_BASE_URL,
    ENV_GRADIUM_TIMEOUT_S,
    DEFAULT_WS_OPEN_TIMEOUT_S,
    ENV_GRADIUM_WS_OPEN_TIMEOUT_S,
)


def _str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def ws_url_from_base(base_url: str) -> str:
    """Derive the speech WebSocket URL from an HTTP(S) API base URL."""
    base = base_url.rstrip("/")
    if base.startswith("https://"):
        base = "wss://" + base[len("https://") :]
    elif base.startswith("http://"):
        base = "ws://" + base[len("http://") :]
    return base + WS_SPEECH_SUFFIX


def load_settings(
    *,
    api_key: str | None = None,
    region: str | None = None,
    base_url: str | None = None,
    timeout_s: float | None = None,
    ws_open_timeout_s: float | None = None,
) -> ClientSettings:
    """Resolve settings; explicit arguments beat environment variables."""
    resolved_region = (region or _str_env(ENV_GRADIUM_REGION, DEFAULT_REGION)).strip().lower()
    if resolved_region not in API_URLS:
        raise ValueError(f"unknown region '{resolved_region}' (expected one of: {', '.join(sorted(API_URLS))})")

    custom_base = base_url or _str_env(ENV_GRADIUM_BASE_URL, "")
    if custom_base:
        resolved_base = custom_base.rstrip("/")
        resolved_ws = ws_url_from_base(resolved_base)
    else:
        resolved_base = API_URLS[resolved_region]
        resolved_ws = WS_URLS[resolved_region]

    resolved_key = (api_key or _str_env(ENV_GRADIUM_API_KEY, "")).strip()
    if not resolved_key:
        raise AuthenticationError(
            f"API key is required. Pass api_key or set the {ENV_GRADIUM_API_KEY} environment variable."
        )

    resolved_timeout = float(timeout_s) if timeout_s is not None else _float_env(ENV_GRADIUM_TIMEOUT_S, DEFAULT_TIMEOUT_S)
    resolved_open_timeout = (
        float(ws_open_timeout_s)
        if ws_open_timeout_s is not None
        else _float_env(ENV_GRADIUM_WS_OPEN_TIMEOUT_S, DEFAULT_WS_OPEN_TIMEOUT_S)
    )

    return ClientSettings(
        api_key=resolved_key,
        region=resolved_region,
        base_url=resolved_base,
        ws_url=resolved_ws,
        timeout_s=max(0.0, resolved_timeout),
        ws_open_timeout_s=max(0.0, resolved_open_timeout),
    )


__all__ = ["load_settings", "ws_url_from_base"]
