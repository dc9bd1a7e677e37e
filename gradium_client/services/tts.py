"""Text-to-speech service."""

from __future__ import annotations

import logging

from gradium_client.state.messages import TTSResult
from gradium_client.state.params import TTSParams
from gradium_client.config.protocol import TTS_PATH
from gradium_client.stream.codec import encode_setup
from gradium_client.stream.tts import TTSStream

from .speech import SpeechService, resolve_model_name

logger = logging.getLogger(__name__)


class TTSService(SpeechService):
    async def stream(self, params: TTSParams) -> TTSStream:
        """Open a streaming synthesis session.

        Example::

            async with await client.tts.stream(TTSParams(voice_id="YTpq7expH9539ERJ")) as stream:
                await stream.wait_ready(timeout=10)
                await stream.send_text("Hello, world!")
                await stream.send_end_of_stream()
                async for chunk in stream.audio():
                    ...
        """
        setup = encode_setup(
            {
                "voice_id": params.voice_id,
                "output_format": str(params.output_format),
                "model_name": resolve_model_name(params.model_name),
            },
            params.json_config,
        )
        return await TTSStream.open(
            self._connector,
            self._url(TTS_PATH),
            self._settings.api_key,
            setup,
            capacities=self._capacities,
        )

    async def create(self, params: TTSParams, *, timeout: float | None = None) -> TTSResult:
        """Synthesize ``params.text`` and return the complete audio."""
        async with await self.stream(params) as stream:
            await stream.wait_ready(timeout)
            await stream.send_text(params.text)
            await stream.send_end_of_stream()
            result = await stream.collect(timeout)
        logger.debug("tts request %s: %d bytes", result.request_id, len(result.raw_data))
        return result


__all__ = ["TTSService"]
