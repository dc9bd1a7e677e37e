"""Text in, audio out."""

from __future__ import annotations

from gradium_client.state.messages import TTSResult
from gradium_client.config.streaming import TTS_DEFAULT_SAMPLE_RATE_HZ

from .codec import encode_text
from .session import StreamSession
from .channels import ResultChannel
from .aggregate import drain_channel


class TTSStream(StreamSession):
    @property
    def request_id(self) -> str:
        info = self._gate.ready_info
        return info.request_id if info is not None else ""

    async def send_text(self, text: str) -> None:
        await self._send(encode_text(text))

    def audio(self) -> ResultChannel[bytes]:
        return self._channels.audio

    async def collect(self, timeout: float | None = None) -> TTSResult:
        """Wait for the stream to end and return all audio in arrival order."""
        chunks = await drain_channel(self._channels.audio, self._errors, timeout)
        return TTSResult(
            raw_data=b"".join(chunks),
            sample_rate=TTS_DEFAULT_SAMPLE_RATE_HZ,
            request_id=self.request_id,
        )


__all__ = ["TTSStream"]
