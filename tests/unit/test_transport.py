from __future__ import annotations

import socket
from http import HTTPStatus

import orjson
import pytest
from websockets.asyncio.server import ServerConnection, serve

from gradium_client import GradiumClient
from gradium_client.transport import open_duplex
from gradium_client.state.params import TTSParams
from gradium_client.errors import ConnectionFailedError

from tests.utils import audio_frame, ready_frame, end_of_stream_frame


async def _tts_server(ws: ServerConnection) -> None:
    setup = orjson.loads(await ws.recv())
    await ws.send(orjson.dumps(ready_frame(request_id=setup["voice_id"])).decode("utf-8"))
    async for raw in ws:
        msg = orjson.loads(raw)
        if msg["type"] == "text":
            await ws.send(orjson.dumps(audio_frame(msg["text"].encode("utf-8"))).decode("utf-8"))
        elif msg["type"] == "end_of_stream":
            await ws.send(orjson.dumps(end_of_stream_frame()).decode("utf-8"))


def _check_key(connection, request):
    if request.headers.get("x-api-key") != "good-key":
        return connection.respond(HTTPStatus.UNAUTHORIZED, "bad key\n")
    return None


def _free_port() -> int:
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.mark.asyncio
async def test_tts_round_trip_over_a_real_websocket() -> None:
    async with serve(_tts_server, "127.0.0.1", 0, process_request=_check_key) as server:
        port = server.sockets[0].getsockname()[1]
        async with GradiumClient(api_key="good-key", base_url=f"http://127.0.0.1:{port}/api") as client:
            result = await client.tts.create(TTSParams(voice_id="voice-1", text="hello"), timeout=5.0)

    assert result.raw_data == b"hello"
    assert result.request_id == "voice-1"


@pytest.mark.asyncio
async def test_rejected_upgrade_is_a_connection_error() -> None:
    async with serve(_tts_server, "127.0.0.1", 0, process_request=_check_key) as server:
        port = server.sockets[0].getsockname()[1]
        with pytest.raises(ConnectionFailedError, match="401"):
            await open_duplex(f"ws://127.0.0.1:{port}/api/speech/tts", "wrong-key", open_timeout_s=5.0)


@pytest.mark.asyncio
async def test_unreachable_server_is_a_connection_error() -> None:
    port = _free_port()
    with pytest.raises(ConnectionFailedError):
        await open_duplex(f"ws://127.0.0.1:{port}/api/speech/tts", "key", open_timeout_s=2.0)
