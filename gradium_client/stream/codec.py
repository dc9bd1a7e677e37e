"""JSON frame codec for the speech WebSocket.

Inbound frames are decoded in two steps: the ``type`` tag is read first and
frames with an unknown tag are ignored, so newer server message kinds never
break an older client. A known tag with a payload of the wrong shape raises
``MalformedFrameError``; the dispatcher drops such frames and keeps reading.
Missing fields take zero values.
"""

from __future__ import annotations

import base64
import binascii
from typing import Any
from collections.abc import Callable, Mapping

import orjson

from gradium_client.errors import MalformedFrameError
from gradium_client.state.messages import (
    ReadyInfo,
    AudioChunk,
    EndOfStream,
    ServerError,
    StepReport,
    EndTextMarker,
    VADPrediction,
    InboundMessage,
    TranscriptSegment,
)
from gradium_client.config.protocol import (
    KEY_TYPE,
    MSG_STEP,
    MSG_TEXT,
    MSG_AUDIO,
    MSG_ERROR,
    MSG_READY,
    MSG_SETUP,
    MSG_END_TEXT,
    MSG_END_OF_STREAM,
)

_MISSING = object()


def _field(msg: Mapping[str, Any], key: str, kind: type | tuple[type, ...], default: Any) -> Any:
    value = msg.get(key, _MISSING)
    if value is _MISSING or value is None:
        return default
    kinds = kind if isinstance(kind, tuple) else (kind,)
    # bool is an int subclass; never accept it as a number.
    if not isinstance(value, kinds) or (isinstance(value, bool) and bool not in kinds):
        raise MalformedFrameError(f"field '{key}' has the wrong type", msg_type=str(msg.get(KEY_TYPE)))
    return value


def _str(msg: Mapping[str, Any], key: str) -> str:
    return _field(msg, key, str, "")


def _int(msg: Mapping[str, Any], key: str) -> int:
    return _field(msg, key, int, 0)


def _float(msg: Mapping[str, Any], key: str) -> float:
    return float(_field(msg, key, (int, float), 0.0))


def _optional_int(msg: Mapping[str, Any], key: str) -> int | None:
    return _field(msg, key, int, None)


def _decode_ready(msg: Mapping[str, Any]) -> ReadyInfo:
    names = _field(msg, "text_stream_names", list, [])
    if not all(isinstance(name, str) for name in names):
        raise MalformedFrameError("field 'text_stream_names' has the wrong type", msg_type=MSG_READY)
    return ReadyInfo(
        request_id=_str(msg, "request_id"),
        model_name=_str(msg, "model_name"),
        sample_rate=_int(msg, "sample_rate"),
        frame_size=_int(msg, "frame_size"),
        delay_in_tokens=_int(msg, "delay_in_tokens"),
        text_stream_names=tuple(names),
    )


def _decode_audio(msg: Mapping[str, Any]) -> AudioChunk:
    encoded = _str(msg, "audio")
    try:
        return AudioChunk(base64.b64decode(encoded, validate=True))
    except (binascii.Error, ValueError) as exc:
        raise MalformedFrameError(f"invalid base64 audio: {exc}", msg_type=MSG_AUDIO) from exc


def _decode_text(msg: Mapping[str, Any]) -> TranscriptSegment:
    return TranscriptSegment(
        text=_str(msg, "text"),
        start_s=_float(msg, "start_s"),
        stream_id=_optional_int(msg, "stream_id"),
    )


def _decode_step(msg: Mapping[str, Any]) -> StepReport:
    raw_vad = _field(msg, "vad", list, [])
    predictions: list[VADPrediction] = []
    for entry in raw_vad:
        if not isinstance(entry, dict):
            raise MalformedFrameError("vad entries must be objects", msg_type=MSG_STEP)
        predictions.append(
            VADPrediction(
                horizon_s=_float(entry, "horizon_s"),
                inactivity_prob=_float(entry, "inactivity_prob"),
            )
        )
    return StepReport(
        vad=tuple(predictions),
        step_idx=_int(msg, "step_idx"),
        step_duration_s=_float(msg, "step_duration_s"),
        total_duration_s=_float(msg, "total_duration_s"),
    )


def _decode_end_text(msg: Mapping[str, Any]) -> EndTextMarker:
    return EndTextMarker(stop_s=_float(msg, "stop_s"), stream_id=_optional_int(msg, "stream_id"))


def _decode_error(msg: Mapping[str, Any]) -> ServerError:
    return ServerError(message=_str(msg, "message"), code=_int(msg, "code"))


_DECODERS: dict[str, Callable[[Mapping[str, Any]], InboundMessage]] = {
    MSG_READY: _decode_ready,
    MSG_AUDIO: _decode_audio,
    MSG_TEXT: _decode_text,
    MSG_STEP: _decode_step,
    MSG_END_TEXT: _decode_end_text,
    MSG_END_OF_STREAM: lambda _msg: EndOfStream(),
    MSG_ERROR: _decode_error,
}


def decode_frame(raw: str | bytes) -> InboundMessage | None:
    """Decode one inbound frame.

    Returns None for frames that are not JSON objects or carry an unknown
    ``type``. Raises MalformedFrameError for known types with a bad payload.
    """
    try:
        msg = orjson.loads(raw)
    except orjson.JSONDecodeError:
        return None
    if not isinstance(msg, dict):
        return None

    msg_type = msg.get(KEY_TYPE)
    if not isinstance(msg_type, str):
        return None
    decoder = _DECODERS.get(msg_type)
    if decoder is None:
        return None
    return decoder(msg)


def _dumps(envelope: dict[str, Any]) -> str:
    return orjson.dumps(envelope).decode("utf-8")


def encode_setup(fields: Mapping[str, Any], json_config: Mapping[str, Any] | None = None) -> str:
    envelope: dict[str, Any] = {KEY_TYPE: MSG_SETUP}
    envelope.update(fields)
    if json_config is not None:
        envelope["json_config"] = dict(json_config)
    return _dumps(envelope)


def encode_text(text: str) -> str:
    return _dumps({KEY_TYPE: MSG_TEXT, "text": text})


def encode_audio(data: bytes) -> str:
    return _dumps({KEY_TYPE: MSG_AUDIO, "audio": base64.b64encode(data).decode("ascii")})


def encode_end_of_stream() -> str:
    return _dumps({KEY_TYPE: MSG_END_OF_STREAM})


__all__ = [
    "decode_frame",
    "encode_audio",
    "encode_end_of_stream",
    "encode_setup",
    "encode_text",
]
