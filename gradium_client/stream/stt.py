"""Audio in, transcript and voice activity out."""

from __future__ import annotations

from gradium_client.state.messages import (
    ReadyInfo,
    StepReport,
    EndTextMarker,
    StructuredResult,
    TranscriptSegment,
)

from .codec import encode_audio
from .session import StreamSession
from .channels import ResultChannel
from .aggregate import drain_channel


class STTStream(StreamSession):
    @property
    def ready_info(self) -> ReadyInfo | None:
        return self._gate.ready_info

    async def send_audio(self, audio: bytes) -> None:
        """Send one chunk of audio in the session's input format."""
        await self._send(encode_audio(audio))

    def text(self) -> ResultChannel[TranscriptSegment]:
        return self._channels.text

    def vad(self) -> ResultChannel[StepReport]:
        return self._channels.step

    def end_text(self) -> ResultChannel[EndTextMarker]:
        return self._channels.end_text

    def all(self) -> ResultChannel[StructuredResult]:
        """Transcript, step and end-of-text items in wire order."""
        return self._channels.unified

    async def collect_text(self, timeout: float | None = None) -> str:
        segments = await drain_channel(self._channels.text, self._errors, timeout)
        return " ".join(segment.text for segment in segments)


__all__ = ["STTStream"]
