"""Async client for the Gradium speech API."""

from .client import GradiumClient
from .config import DEFAULT_MODEL_NAME
from .runtime import configure_logging
from .stream import STTStream, TTSStream, ChannelClosed, ResultChannel, StreamSession
from .errors import (
    APIError,
    GradiumError,
    NotFoundError,
    ProtocolError,
    RateLimitError,
    ValidationError,
    AuthenticationError,
    InternalServerError,
    RequestTimeoutError,
    ConnectionFailedError,
    DeadlineExceededError,
)
from .state import (
    Voice,
    ReadyInfo,
    STTParams,
    TTSParams,
    TTSResult,
    StepReport,
    InputFormat,
    OutputFormat,
    SessionState,
    EndTextMarker,
    VADPrediction,
    CreditsSummary,
    VoiceListParams,
    TerminationReason,
    TranscriptSegment,
    VoiceCreateParams,
    VoiceUpdateParams,
    VoiceCreateResponse,
)

__all__ = [
    "APIError",
    "AuthenticationError",
    "ChannelClosed",
    "ConnectionFailedError",
    "CreditsSummary",
    "DEFAULT_MODEL_NAME",
    "DeadlineExceededError",
    "EndTextMarker",
    "GradiumClient",
    "GradiumError",
    "InputFormat",
    "InternalServerError",
    "NotFoundError",
    "OutputFormat",
    "ProtocolError",
    "RateLimitError",
    "ReadyInfo",
    "RequestTimeoutError",
    "ResultChannel",
    "STTParams",
    "STTStream",
    "SessionState",
    "StepReport",
    "StreamSession",
    "TTSParams",
    "TTSResult",
    "TTSStream",
    "TerminationReason",
    "TranscriptSegment",
    "VADPrediction",
    "ValidationError",
    "Voice",
    "VoiceCreateParams",
    "VoiceCreateResponse",
    "VoiceListParams",
    "VoiceUpdateParams",
    "configure_logging",
]
