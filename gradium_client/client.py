"""Top-level Gradium API client."""

from __future__ import annotations

from types import TracebackType
from typing import Self

import httpx

from gradium_client.stream.session import Connector
from gradium_client.runtime.settings_loader import load_settings
from gradium_client.state.settings import ClientSettings, ChannelCapacities
from gradium_client.services import STTService, TTSService, VoicesService, CreditsService


class GradiumClient:
    """Entry point exposing the speech streams and the REST resources.

    The API key falls back to ``GRADIUM_API_KEY``; the region and base URL to
    ``GRADIUM_REGION`` / ``GRADIUM_BASE_URL``. A custom ``http_client`` is
    used as-is and left open by ``aclose()``.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        region: str | None = None,
        base_url: str | None = None,
        timeout_s: float | None = None,
        http_client: httpx.AsyncClient | None = None,
        connector: Connector | None = None,
        capacities: ChannelCapacities | None = None,
    ) -> None:
        self.settings: ClientSettings = load_settings(
            api_key=api_key,
            region=region,
            base_url=base_url,
            timeout_s=timeout_s,
        )
        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=self.settings.timeout_s or None)

        self.tts = TTSService(self.settings, connector=connector, capacities=capacities)
        self.stt = STTService(self.settings, connector=connector, capacities=capacities)
        self.voices = VoicesService(self.settings, self._http)
        self.credits = CreditsService(self.settings, self._http)

    @property
    def api_key(self) -> str:
        return self.settings.api_key

    @property
    def base_url(self) -> str:
        return self.settings.base_url

    @property
    def ws_url(self) -> str:
        return self.settings.ws_url

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()


__all__ = ["GradiumClient"]
