"""Streaming session handle shared by the speech capabilities."""

from __future__ import annotations

import asyncio
import logging
import contextlib
from types import TracebackType
from typing import Self
from collections.abc import Callable, Awaitable

from websockets.exceptions import ConnectionClosed

from gradium_client.state.messages import ReadyInfo
from gradium_client.state.settings import ChannelCapacities
from gradium_client.state.lifecycle import SessionState, TerminationReason
from gradium_client.errors import GradiumError, ConnectionFailedError, DeadlineExceededError

from .gate import ReadinessGate
from .register import ErrorRegister
from .codec import encode_end_of_stream
from .dispatcher import Dispatcher, ResultChannels, DuplexConnection

logger = logging.getLogger(__name__)

Connector = Callable[[str, str], Awaitable[DuplexConnection]]


async def _discard(conn: DuplexConnection) -> None:
    with contextlib.suppress(Exception):
        await conn.close()


class StreamSession:
    """One duplex connection: handshake, background dispatcher, results, teardown.

    Outbound writes go through a single lock so concurrent senders never
    interleave frames. close() is idempotent and safe to call while the
    dispatcher is still running; the dispatcher also releases the connection
    by itself once the stream terminates.
    """

    def __init__(self, conn: DuplexConnection, *, capacities: ChannelCapacities | None = None) -> None:
        self._conn = conn
        self._gate = ReadinessGate()
        self._errors = ErrorRegister()
        self._channels = ResultChannels.create(capacities or ChannelCapacities())
        self._send_lock = asyncio.Lock()
        self._close_lock = asyncio.Lock()
        self._closed = False
        self._dispatcher = Dispatcher(
            conn,
            gate=self._gate,
            errors=self._errors,
            channels=self._channels,
            on_terminated=self._release,
        )
        self._task: asyncio.Task[None] | None = None

    @classmethod
    async def open(
        cls,
        connector: Connector,
        url: str,
        api_key: str,
        setup: str,
        *,
        capacities: ChannelCapacities | None = None,
    ) -> Self:
        conn = await connector(url, api_key)
        session = cls(conn, capacities=capacities)
        try:
            await conn.send(setup)
        except (ConnectionClosed, OSError) as exc:
            await _discard(conn)
            raise ConnectionFailedError(f"failed to send setup message: {exc}") from exc
        except BaseException:
            await _discard(conn)
            raise
        session._start()
        logger.debug("session opened: %s", url)
        return session

    def _start(self) -> None:
        if self._task is None:
            self._task = asyncio.create_task(self._dispatcher.run())

    @property
    def state(self) -> SessionState:
        if self._task is None:
            return SessionState.CONNECTING
        return self._dispatcher.state

    @property
    def termination(self) -> TerminationReason | None:
        return self._dispatcher.termination

    @property
    def error(self) -> GradiumError | None:
        return self._errors.get()

    @property
    def closed(self) -> bool:
        return self._closed

    async def wait_ready(self, timeout: float | None = None) -> ReadyInfo:
        """Wait for the ready message.

        Raises the session error if one was recorded, even after the session
        became ready, so a mid-stream failure surfaces here too.
        """
        info = await self._gate.wait(timeout)
        error = self._errors.get()
        if error is not None:
            raise error.with_traceback(None)
        return info

    async def _send(self, frame: str) -> None:
        async with self._send_lock:
            if self._closed:
                raise ConnectionFailedError("session is closed")
            try:
                await self._conn.send(frame)
            except ConnectionClosed as exc:
                raise ConnectionFailedError(f"write error: {exc}") from exc

    async def send_end_of_stream(self) -> None:
        await self._send(encode_end_of_stream())

    def done(self) -> bool:
        return self._dispatcher.done_event.is_set()

    async def wait_done(self, timeout: float | None = None) -> None:
        try:
            async with asyncio.timeout(timeout):
                await self._dispatcher.done_event.wait()
        except TimeoutError as exc:
            raise DeadlineExceededError("timed out waiting for the stream to end") from exc

    async def _release(self) -> None:
        async with self._close_lock:
            if self._closed:
                return
            self._closed = True
            with contextlib.suppress(Exception):
                await self._conn.close()

    async def close(self) -> None:
        await self._release()
        task = self._task
        if task is not None and task is not asyncio.current_task():
            await asyncio.wait({task})

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()


__all__ = ["Connector", "StreamSession"]
