"""Background read loop for a streaming session."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Protocol
from dataclasses import dataclass
from collections.abc import Callable, Awaitable

from websockets.exceptions import ConnectionClosed

from gradium_client.state.settings import ChannelCapacities
from gradium_client.state.lifecycle import SessionState, TerminationReason
from gradium_client.errors import ProtocolError, MalformedFrameError, ConnectionFailedError
from gradium_client.state.messages import (
    ReadyInfo,
    AudioChunk,
    EndOfStream,
    ServerError,
    StepReport,
    EndTextMarker,
    StructuredResult,
    TranscriptSegment,
)

from .codec import decode_frame
from .gate import ReadinessGate
from .register import ErrorRegister
from .channels import ResultChannel

logger = logging.getLogger(__name__)


class DuplexConnection(Protocol):
    async def recv(self) -> str | bytes: ...

    async def send(self, message: str) -> None: ...

    async def close(self) -> None: ...


@dataclass(slots=True)
class ResultChannels:
    audio: ResultChannel[bytes]
    text: ResultChannel[TranscriptSegment]
    step: ResultChannel[StepReport]
    end_text: ResultChannel[EndTextMarker]
    unified: ResultChannel[StructuredResult]

    @classmethod
    def create(cls, capacities: ChannelCapacities) -> ResultChannels:
        return cls(
            audio=ResultChannel(capacities.audio, name="audio"),
            text=ResultChannel(capacities.text, name="text"),
            step=ResultChannel(capacities.step, name="step"),
            end_text=ResultChannel(capacities.end_text, name="end_text"),
            unified=ResultChannel(capacities.unified, name="unified"),
        )

    def close_all(self) -> None:
        for channel in (self.audio, self.text, self.step, self.end_text, self.unified):
            channel.close()


class Dispatcher:
    """Owns the read side of the connection.

    Decodes every inbound frame, resolves the readiness gate, publishes results
    and, on the first terminal condition, closes every channel once before
    signalling completion.
    """

    def __init__(
        self,
        conn: DuplexConnection,
        *,
        gate: ReadinessGate,
        errors: ErrorRegister,
        channels: ResultChannels,
        on_terminated: Callable[[], Awaitable[Any]] | None = None,
    ) -> None:
        self._conn = conn
        self._gate = gate
        self._errors = errors
        self._channels = channels
        self._on_terminated = on_terminated
        self.state = SessionState.AWAITING_READY
        self.termination: TerminationReason | None = None
        self.done_event = asyncio.Event()

    async def run(self) -> None:
        reason = TerminationReason.CONNECTION_CLOSED
        try:
            reason = await self._read_loop()
        except asyncio.CancelledError:
            self._fail(ConnectionFailedError("session dispatcher cancelled"))
            raise
        except Exception as exc:
            logger.debug("dispatcher stopped on unexpected error", exc_info=True)
            self._fail(ConnectionFailedError(f"read error: {exc}"))
        finally:
            self._terminate(reason)
            if self._on_terminated is not None:
                try:
                    await self._on_terminated()
                except Exception:
                    logger.debug("connection release after termination failed", exc_info=True)

    async def _read_loop(self) -> TerminationReason:
        while True:
            try:
                raw = await self._conn.recv()
            except ConnectionClosed as exc:
                logger.debug("connection closed: %s", exc)
                self._fail(ConnectionFailedError(f"read error: {exc}"))
                return TerminationReason.CONNECTION_CLOSED

            try:
                msg = decode_frame(raw)
            except MalformedFrameError as exc:
                logger.debug("discarding malformed %s frame: %s", exc.msg_type, exc)
                continue
            if msg is None:
                logger.debug("discarding unrecognized frame")
                continue

            if isinstance(msg, ReadyInfo):
                self._gate.resolve_ready(msg)
                if self.state is SessionState.AWAITING_READY:
                    self.state = SessionState.STREAMING
                continue

            if isinstance(msg, AudioChunk):
                self._channels.audio.publish(msg.data)
                continue

            if isinstance(msg, TranscriptSegment):
                self._publish(self._channels.text, msg)
                continue

            if isinstance(msg, StepReport):
                self._publish(self._channels.step, msg)
                continue

            if isinstance(msg, EndTextMarker):
                self._publish(self._channels.end_text, msg)
                continue

            if isinstance(msg, EndOfStream):
                if not self._gate.resolved:
                    self._gate.resolve_error(ConnectionFailedError("stream ended before the session became ready"))
                return TerminationReason.END_OF_STREAM

            if isinstance(msg, ServerError):
                self._fail(ProtocolError(msg.message, code=msg.code))
                return TerminationReason.ERROR

    def _publish(self, channel: ResultChannel[Any], item: StructuredResult) -> None:
        channel.publish(item)
        self._channels.unified.publish(item)

    def _fail(self, error: ConnectionFailedError | ProtocolError) -> None:
        self._errors.set_if_absent(error)
        self._gate.resolve_error(self._errors.get() or error)

    def _terminate(self, reason: TerminationReason) -> None:
        if self.state is SessionState.TERMINATED:
            return
        self.state = SessionState.TERMINATED
        self.termination = reason
        logger.debug("session terminated: %s", reason.value)
        self._channels.close_all()
        self.done_event.set()


__all__ = ["Dispatcher", "DuplexConnection", "ResultChannels"]
