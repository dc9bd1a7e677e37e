"""One-shot readiness signal for a streaming session."""

from __future__ import annotations

import asyncio

from gradium_client.state.messages import ReadyInfo
from gradium_client.errors import GradiumError, DeadlineExceededError


class ReadinessGate:
    """Resolves exactly once, either to a ReadyInfo or to an error.

    The outcome is stored as a single tagged value behind one event so the gate
    can never report both. Waiting with a timeout never changes the outcome.
    """

    def __init__(self) -> None:
        self._event = asyncio.Event()
        self._outcome: ReadyInfo | GradiumError | None = None

    @property
    def resolved(self) -> bool:
        return self._event.is_set()

    @property
    def ready_info(self) -> ReadyInfo | None:
        return self._outcome if isinstance(self._outcome, ReadyInfo) else None

    def resolve_ready(self, info: ReadyInfo) -> bool:
        return self._resolve(info)

    def resolve_error(self, error: GradiumError) -> bool:
        return self._resolve(error)

    def _resolve(self, outcome: ReadyInfo | GradiumError) -> bool:
        if self._event.is_set():
            return False
        self._outcome = outcome
        self._event.set()
        return True

    async def wait(self, timeout: float | None = None) -> ReadyInfo:
        try:
            async with asyncio.timeout(timeout):
                await self._event.wait()
        except TimeoutError as exc:
            raise DeadlineExceededError("timed out waiting for the session to become ready") from exc

        outcome = self._outcome
        if isinstance(outcome, GradiumError):
            raise outcome.with_traceback(None)
        if outcome is None:
            raise RuntimeError("readiness gate set without an outcome")
        return outcome


__all__ = ["ReadinessGate"]
