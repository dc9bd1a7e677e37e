"""Configuration module exports (env-resolved constants only)."""

from .streaming import DEFAULT_MODEL_NAME
from .logging import LOG_LEVEL, LOG_FORMAT

__all__ = [
    "DEFAULT_MODEL_NAME",
    "LOG_FORMAT",
    "LOG_LEVEL",
]
