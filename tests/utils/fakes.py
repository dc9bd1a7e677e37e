"""In-memory stand-ins for the speech WebSocket."""

from __future__ import annotations

import asyncio
from typing import Any

import orjson
from websockets.exceptions import ConnectionClosedError


class FakeConnection:
    """Scripted duplex connection.

    Frames pushed with push() are returned by recv() in order. ``replies`` are
    held back until the client sends end_of_stream. close() (or hang_up())
    makes the next recv() after the queued frames raise ConnectionClosedError,
    like a real socket going away.
    """

    def __init__(self, *frames: Any, replies: tuple[Any, ...] = ()) -> None:
        self.replies = list(replies)
        self.inbound: asyncio.Queue[str | bytes | None] = asyncio.Queue()
        self.sent: list[str] = []
        self.closed = False
        self.close_calls = 0
        for frame in frames:
            self.push(frame)

    def push(self, frame: Any) -> None:
        if not isinstance(frame, (str, bytes)):
            frame = orjson.dumps(frame).decode("utf-8")
        self.inbound.put_nowait(frame)

    def hang_up(self) -> None:
        self.inbound.put_nowait(None)

    def sent_json(self) -> list[dict[str, Any]]:
        return [orjson.loads(frame) for frame in self.sent]

    async def recv(self) -> str | bytes:
        frame = await self.inbound.get()
        if frame is None:
            self.inbound.put_nowait(None)
            raise ConnectionClosedError(None, None)
        return frame

    async def send(self, message: str) -> None:
        if self.closed:
            raise ConnectionClosedError(None, None)
        self.sent.append(message)
        if orjson.loads(message).get("type") == "end_of_stream":
            for frame in self.replies:
                self.push(frame)
            self.replies.clear()

    async def close(self) -> None:
        self.close_calls += 1
        if self.closed:
            return
        self.closed = True
        self.inbound.put_nowait(None)


class FakeConnector:
    def __init__(self, conn: FakeConnection) -> None:
        self.conn = conn
        self.calls: list[tuple[str, str]] = []

    async def __call__(self, url: str, api_key: str) -> FakeConnection:
        self.calls.append((url, api_key))
        return self.conn


__all__ = ["FakeConnection", "FakeConnector"]
