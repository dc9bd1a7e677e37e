from .settings import ClientSettings, ChannelCapacities
from .lifecycle import SessionState, TerminationReason
from .params import STTParams, TTSParams, InputFormat, OutputFormat
from .voices import (
    Voice,
    CreditsSummary,
    VoiceListParams,
    VoiceCreateParams,
    VoiceUpdateParams,
    VoiceCreateResponse,
)
from .messages import (
    ReadyInfo,
    TTSResult,
    AudioChunk,
    EndOfStream,
    ServerError,
    StepReport,
    EndTextMarker,
    VADPrediction,
    InboundMessage,
    StructuredResult,
    TranscriptSegment,
)

__all__ = [
    "AudioChunk",
    "ChannelCapacities",
    "ClientSettings",
    "CreditsSummary",
    "EndOfStream",
    "EndTextMarker",
    "InboundMessage",
    "InputFormat",
    "OutputFormat",
    "ReadyInfo",
    "STTParams",
    "ServerError",
    "SessionState",
    "StepReport",
    "StructuredResult",
    "TTSParams",
    "TTSResult",
    "TerminationReason",
    "TranscriptSegment",
    "VADPrediction",
    "Voice",
    "VoiceCreateParams",
    "VoiceCreateResponse",
    "VoiceListParams",
    "VoiceUpdateParams",
]
