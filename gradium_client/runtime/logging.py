"""Logging initialization."""

from __future__ import annotations

import os
import logging

from gradium_client.config.logging import LOG_LEVEL, LOG_FORMAT, ENV_SHOW_WS_LOGS


def configure_logging(level: str | None = None) -> None:
    # websockets logs every frame at DEBUG. Keep it tame unless explicitly enabled.
    if (os.getenv(ENV_SHOW_WS_LOGS) or "").strip().lower() not in {"1", "true", "yes"}:
        logging.getLogger("websockets").setLevel(logging.WARNING)
    logging.basicConfig(level=(level or LOG_LEVEL).strip().upper(), format=LOG_FORMAT)


__all__ = ["configure_logging"]
