from .tts import TTSStream
from .stt import STTStream
from .gate import ReadinessGate
from .register import ErrorRegister
from .session import Connector, StreamSession
from .channels import ChannelClosed, ResultChannel
from .dispatcher import Dispatcher, ResultChannels, DuplexConnection

__all__ = [
    "ChannelClosed",
    "Connector",
    "Dispatcher",
    "DuplexConnection",
    "ErrorRegister",
    "ReadinessGate",
    "ResultChannel",
    "ResultChannels",
    "STTStream",
    "StreamSession",
    "TTSStream",
]
