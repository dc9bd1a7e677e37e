"""Decoded stream messages and result items (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ReadyInfo:
    """Handshake outcome. Text-to-speech sessions only fill ``request_id``."""

    request_id: str = ""
    model_name: str = ""
    sample_rate: int = 0
    frame_size: int = 0
    delay_in_tokens: int = 0
    text_stream_names: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class AudioChunk:
    data: bytes


@dataclass(frozen=True, slots=True)
class TranscriptSegment:
    text: str
    start_s: float
    stream_id: int | None = None


@dataclass(frozen=True, slots=True)
class VADPrediction:
    horizon_s: float
    inactivity_prob: float


@dataclass(frozen=True, slots=True)
class StepReport:
    vad: tuple[VADPrediction, ...]
    step_idx: int
    step_duration_s: float
    total_duration_s: float


@dataclass(frozen=True, slots=True)
class EndTextMarker:
    stop_s: float
    stream_id: int | None = None


@dataclass(frozen=True, slots=True)
class EndOfStream:
    pass


@dataclass(frozen=True, slots=True)
class ServerError:
    message: str
    code: int


@dataclass(slots=True)
class TTSResult:
    raw_data: bytes
    sample_rate: int
    request_id: str = ""


InboundMessage = ReadyInfo | AudioChunk | TranscriptSegment | StepReport | EndTextMarker | EndOfStream | ServerError

StructuredResult = TranscriptSegment | StepReport | EndTextMarker


__all__ = [
    "AudioChunk",
    "EndOfStream",
    "EndTextMarker",
    "InboundMessage",
    "ReadyInfo",
    "ServerError",
    "StepReport",
    "StructuredResult",
    "TTSResult",
    "TranscriptSegment",
    "VADPrediction",
]
