from .stt import STTService
from .tts import TTSService
from .voices import VoicesService
from .credits import CreditsService

__all__ = ["CreditsService", "STTService", "TTSService", "VoicesService"]
