"""Duplex connection setup for the speech WebSocket."""

from __future__ import annotations

import logging

from websockets.asyncio.client import ClientConnection, connect
from websockets.exceptions import InvalidStatus, WebSocketException

from gradium_client.errors import ConnectionFailedError
from gradium_client.config.protocol import AUTH_HEADER
from gradium_client.config.client import WS_MAX_MESSAGE_BYTES, DEFAULT_WS_OPEN_TIMEOUT_S

logger = logging.getLogger(__name__)


async def open_duplex(url: str, api_key: str, *, open_timeout_s: float = DEFAULT_WS_OPEN_TIMEOUT_S) -> ClientConnection:
    """Open a WebSocket to ``url`` authenticated with the API key header."""
    try:
        return await connect(
            url,
            additional_headers=[(AUTH_HEADER, api_key)],
            open_timeout=open_timeout_s,
            max_size=WS_MAX_MESSAGE_BYTES,
        )
    except InvalidStatus as exc:
        status = exc.response.status_code
        logger.debug("websocket upgrade rejected: url=%s status=%s", url, status)
        raise ConnectionFailedError(f"failed to connect to {url}: server rejected upgrade ({status})") from exc
    except (OSError, TimeoutError, WebSocketException) as exc:
        logger.debug("websocket connect failed: url=%s", url, exc_info=True)
        raise ConnectionFailedError(f"failed to connect to {url}: {exc}") from exc


__all__ = ["open_duplex"]
