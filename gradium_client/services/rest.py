"""Request/response plumbing for the REST resources."""

from __future__ import annotations

import logging
from typing import Any

import httpx
import orjson

from gradium_client.state.settings import ClientSettings
from gradium_client.config.protocol import AUTH_HEADER
from gradium_client.errors import RequestTimeoutError, ConnectionFailedError, error_from_response

logger = logging.getLogger(__name__)


class RestResource:
    def __init__(self, settings: ClientSettings, http: httpx.AsyncClient) -> None:
        self._settings = settings
        self._http = http

    async def _request(
        self,
        method: str,
        path: str,
        *,
        expected: int = 200,
        params: dict[str, Any] | None = None,
        json_body: Any = None,
        data: dict[str, str] | None = None,
        files: dict[str, tuple[str, bytes]] | None = None,
    ) -> httpx.Response:
        headers = {AUTH_HEADER: self._settings.api_key, "Accept": "application/json"}
        content: bytes | None = None
        if json_body is not None:
            headers["Content-Type"] = "application/json"
            content = orjson.dumps(json_body)

        url = self._settings.base_url + path
        try:
            response = await self._http.request(
                method,
                url,
                params=params,
                headers=headers,
                content=content,
                data=data,
                files=files,
                timeout=self._settings.timeout_s or None,
            )
        except httpx.TimeoutException as exc:
            raise RequestTimeoutError(f"{method} {path} timed out") from exc
        except httpx.TransportError as exc:
            raise ConnectionFailedError(str(exc)) from exc

        if response.status_code != expected:
            logger.debug("%s %s -> %d", method, path, response.status_code)
            raise error_from_response(response.status_code, response.content, response.headers)
        return response

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        return orjson.loads(response.content)


__all__ = ["RestResource"]
