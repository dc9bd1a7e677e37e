"""Speech-to-text service."""

from __future__ import annotations

from gradium_client.state.params import STTParams
from gradium_client.config.protocol import STT_PATH
from gradium_client.stream.stt import STTStream
from gradium_client.stream.codec import encode_setup
from gradium_client.config.streaming import STT_CHUNK_BYTES

from .speech import SpeechService, resolve_model_name


class STTService(SpeechService):
    async def stream(self, params: STTParams) -> STTStream:
        """Open a streaming transcription session.

        Audio is expected as PCM 24kHz 16-bit mono unless ``input_format``
        says otherwise; ``wait_ready()`` returns the sample rate and frame size
        the server wants.
        """
        setup = encode_setup(
            {
                "input_format": str(params.input_format),
                "model_name": resolve_model_name(params.model_name),
            },
            params.json_config,
        )
        return await STTStream.open(
            self._connector,
            self._url(STT_PATH),
            self._settings.api_key,
            setup,
            capacities=self._capacities,
        )

    async def transcribe(
        self,
        params: STTParams,
        audio: bytes,
        *,
        chunk_bytes: int = STT_CHUNK_BYTES,
        timeout: float | None = None,
    ) -> str:
        async with await self.stream(params) as stream:
            await stream.wait_ready(timeout)
            for offset in range(0, len(audio), chunk_bytes):
                await stream.send_audio(audio[offset : offset + chunk_bytes])
            await stream.send_end_of_stream()
            return await stream.collect_text(timeout)


__all__ = ["STTService"]
