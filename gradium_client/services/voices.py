"""Voice management."""

from __future__ import annotations

from typing import Any

from gradium_client.state.voices import (
    Voice,
    VoiceListParams,
    VoiceCreateParams,
    VoiceUpdateParams,
    VoiceCreateResponse,
)

from .rest import RestResource


class VoicesService(RestResource):
    async def list(self, params: VoiceListParams | None = None) -> list[Voice]:
        """Return the voices of the authenticated organization."""
        query: dict[str, Any] = {}
        if params is not None:
            if params.skip > 0:
                query["skip"] = params.skip
            if params.limit > 0:
                query["limit"] = params.limit
            if params.include_catalog:
                query["include_catalog"] = "true"
        response = await self._request("GET", "/voices/", params=query or None)
        return [Voice.from_dict(item) for item in self._json(response)]

    async def get(self, voice_uid: str) -> Voice:
        response = await self._request("GET", f"/voices/{voice_uid}")
        return Voice.from_dict(self._json(response))

    async def create(self, audio: bytes, filename: str, params: VoiceCreateParams) -> VoiceCreateResponse:
        """Create a custom voice from an audio sample (multipart upload)."""
        fields: dict[str, str] = {"name": params.name}
        if params.input_format:
            fields["input_format"] = params.input_format
        if params.description is not None:
            fields["description"] = params.description
        if params.language is not None:
            fields["language"] = params.language
        if params.start_s:
            fields["start_s"] = f"{params.start_s:f}"
        if params.timeout_s:
            fields["timeout_s"] = f"{params.timeout_s:f}"

        response = await self._request(
            "POST",
            "/voices/",
            expected=201,
            data=fields,
            files={"audio_file": (filename, audio)},
        )
        body = self._json(response)
        return VoiceCreateResponse(
            uid=body.get("uid"),
            error=body.get("error"),
            was_updated=bool(body.get("was_updated", False)),
        )

    async def update(self, voice_uid: str, params: VoiceUpdateParams) -> Voice:
        response = await self._request("PUT", f"/voices/{voice_uid}", json_body=params.to_payload())
        return Voice.from_dict(self._json(response))

    async def delete(self, voice_uid: str) -> None:
        await self._request("DELETE", f"/voices/{voice_uid}", expected=204)


__all__ = ["VoicesService"]
