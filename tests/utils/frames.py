"""Builders for server-sent frames."""

from __future__ import annotations

import base64
from typing import Any


def ready_frame(request_id: str = "req-1", **extra: Any) -> dict[str, Any]:
    frame: dict[str, Any] = {
        "type": "ready",
        "request_id": request_id,
        "model_name": "default",
        "sample_rate": 24000,
        "frame_size": 1920,
        "delay_in_tokens": 6,
        "text_stream_names": ["text"],
    }
    frame.update(extra)
    return frame


def audio_frame(data: bytes) -> dict[str, Any]:
    return {"type": "audio", "audio": base64.b64encode(data).decode("ascii")}


def text_frame(text: str, start_s: float = 0.0, stream_id: int | None = None) -> dict[str, Any]:
    frame: dict[str, Any] = {"type": "text", "text": text, "start_s": start_s}
    if stream_id is not None:
        frame["stream_id"] = stream_id
    return frame


def step_frame(step_idx: int, inactivity_prob: float = 0.1) -> dict[str, Any]:
    return {
        "type": "step",
        "vad": [{"horizon_s": 0.5, "inactivity_prob": inactivity_prob}],
        "step_idx": step_idx,
        "step_duration_s": 0.08,
        "total_duration_s": step_idx * 0.08,
    }


def end_text_frame(stop_s: float) -> dict[str, Any]:
    return {"type": "end_text", "stop_s": stop_s}


def error_frame(message: str, code: int = 0) -> dict[str, Any]:
    return {"type": "error", "message": message, "code": code}


def end_of_stream_frame() -> dict[str, Any]:
    return {"type": "end_of_stream"}


__all__ = [
    "audio_frame",
    "end_of_stream_frame",
    "end_text_frame",
    "error_frame",
    "ready_frame",
    "step_frame",
    "text_frame",
]
