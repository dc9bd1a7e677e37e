"""Drain helpers behind collect() and collect_text()."""

from __future__ import annotations

import asyncio
from typing import TypeVar

from gradium_client.errors import DeadlineExceededError

from .register import ErrorRegister
from .channels import ResultChannel

T = TypeVar("T")


async def drain_channel(channel: ResultChannel[T], errors: ErrorRegister, timeout: float | None = None) -> list[T]:
    """Read ``channel`` until it closes; the registered error, if any, wins."""
    items: list[T] = []
    try:
        async with asyncio.timeout(timeout):
            async for item in channel:
                items.append(item)
    except TimeoutError as exc:
        raise DeadlineExceededError(f"timed out draining the {channel.name} channel") from exc

    error = errors.get()
    if error is not None:
        raise error.with_traceback(None)
    return items


__all__ = ["drain_channel"]
