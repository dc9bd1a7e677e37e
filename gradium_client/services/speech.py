"""Shared plumbing for the streaming speech services."""

from __future__ import annotations

from gradium_client.transport import open_duplex
from gradium_client.stream.session import Connector
from gradium_client.stream.dispatcher import DuplexConnection
from gradium_client.config.streaming import DEFAULT_MODEL_NAME
from gradium_client.state.settings import ClientSettings, ChannelCapacities


def resolve_model_name(model_name: str | None) -> str:
    return model_name or DEFAULT_MODEL_NAME


class SpeechService:
    def __init__(
        self,
        settings: ClientSettings,
        *,
        connector: Connector | None = None,
        capacities: ChannelCapacities | None = None,
    ) -> None:
        self._settings = settings
        self._connector = connector or self._open_duplex
        self._capacities = capacities

    async def _open_duplex(self, url: str, api_key: str) -> DuplexConnection:
        return await open_duplex(url, api_key, open_timeout_s=self._settings.ws_open_timeout_s)

    def _url(self, path: str) -> str:
        return self._settings.ws_url + path


__all__ = ["SpeechService", "resolve_model_name"]
