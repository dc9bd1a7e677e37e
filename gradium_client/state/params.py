"""Request parameters for the speech capabilities (dataclasses only)."""

from __future__ import annotations

from enum import StrEnum, unique
from typing import Any
from dataclasses import dataclass


@unique
class OutputFormat(StrEnum):
    WAV = "wav"
    PCM = "pcm"
    OPUS = "opus"
    ULAW_8000 = "ulaw_8000"
    ALAW_8000 = "alaw_8000"
    PCM_16000 = "pcm_16000"
    PCM_24000 = "pcm_24000"


@unique
class InputFormat(StrEnum):
    PCM = "pcm"
    WAV = "wav"
    OPUS = "opus"


@dataclass(slots=True)
class TTSParams:
    """Text-to-speech parameters.

    ``json_config`` is forwarded verbatim as the nested ``json_config`` block of
    the setup message (for example ``{"padding_bonus": -0.5}`` to speak faster).
    ``text`` is only used by one-shot synthesis; it is never part of the setup.
    """

    voice_id: str
    output_format: OutputFormat | str = OutputFormat.WAV
    model_name: str | None = None
    text: str = ""
    json_config: dict[str, Any] | None = None


@dataclass(slots=True)
class STTParams:
    input_format: InputFormat | str = InputFormat.PCM
    model_name: str | None = None
    json_config: dict[str, Any] | None = None


__all__ = ["InputFormat", "OutputFormat", "STTParams", "TTSParams"]
