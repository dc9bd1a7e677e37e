"""Bounded, lossy result channels fed by the dispatcher."""

from __future__ import annotations

import asyncio
import logging
from typing import Generic, TypeVar
from collections import deque

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ChannelClosed(Exception):
    """Raised by ResultChannel.get() once the channel is closed and drained."""


class ResultChannel(Generic[T]):
    """A bounded queue with non-blocking, drop-on-full publishing.

    A full channel discards the newest item instead of blocking the producer,
    so one slow consumer cannot stall the read loop or the other channels.
    Items buffered before close() are still delivered; after that iteration
    ends and never restarts.
    """

    def __init__(self, capacity: int, *, name: str = "") -> None:
        if capacity <= 0:
            raise ValueError("channel capacity must be positive")
        self.name = name
        self.capacity = int(capacity)
        self.dropped: int = 0
        self._items: deque[T] = deque()
        self._closed = False
        self._changed = asyncio.Event()

    @property
    def closed(self) -> bool:
        return self._closed

    def __len__(self) -> int:
        return len(self._items)

    def publish(self, item: T) -> bool:
        if self._closed:
            return False
        if len(self._items) >= self.capacity:
            self.dropped += 1
            logger.debug("channel %s full (capacity=%d); dropped item", self.name, self.capacity)
            return False
        self._items.append(item)
        self._changed.set()
        return True

    def close(self) -> None:
        if self._closed:
            raise RuntimeError(f"channel {self.name or '<unnamed>'} already closed")
        self._closed = True
        self._changed.set()

    def get_nowait(self) -> T:
        if self._items:
            return self._items.popleft()
        if self._closed:
            raise ChannelClosed(self.name)
        raise asyncio.QueueEmpty

    async def get(self) -> T:
        while not self._items:
            if self._closed:
                raise ChannelClosed(self.name)
            self._changed.clear()
            await self._changed.wait()
        return self._items.popleft()

    def __aiter__(self) -> ResultChannel[T]:
        return self

    async def __anext__(self) -> T:
        try:
            return await self.get()
        except ChannelClosed:
            raise StopAsyncIteration from None


__all__ = ["ChannelClosed", "ResultChannel"]
