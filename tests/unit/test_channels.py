from __future__ import annotations

import asyncio

import pytest

from gradium_client.stream.channels import ChannelClosed, ResultChannel


def test_publish_drops_when_full() -> None:
    channel: ResultChannel[int] = ResultChannel(2, name="audio")
    assert channel.publish(1) is True
    assert channel.publish(2) is True
    assert channel.publish(3) is False
    assert channel.dropped == 1
    assert len(channel) == 2


def test_publish_after_close_is_discarded() -> None:
    channel: ResultChannel[int] = ResultChannel(2)
    channel.close()
    assert channel.publish(1) is False
    assert len(channel) == 0


def test_close_twice_raises() -> None:
    channel: ResultChannel[int] = ResultChannel(1, name="text")
    channel.close()
    with pytest.raises(RuntimeError):
        channel.close()


def test_capacity_must_be_positive() -> None:
    with pytest.raises(ValueError):
        ResultChannel(0)


def test_get_nowait() -> None:
    channel: ResultChannel[str] = ResultChannel(2)
    with pytest.raises(asyncio.QueueEmpty):
        channel.get_nowait()
    channel.publish("a")
    channel.close()
    assert channel.get_nowait() == "a"
    with pytest.raises(ChannelClosed):
        channel.get_nowait()


@pytest.mark.asyncio
async def test_buffered_items_survive_close() -> None:
    channel: ResultChannel[int] = ResultChannel(5)
    for i in range(3):
        channel.publish(i)
    channel.close()

    assert [item async for item in channel] == [0, 1, 2]
    assert [item async for item in channel] == []
    with pytest.raises(ChannelClosed):
        await channel.get()


@pytest.mark.asyncio
async def test_consumer_wakes_on_publish_and_close() -> None:
    channel: ResultChannel[str] = ResultChannel(5)

    async def consume() -> list[str]:
        return [item async for item in channel]

    consumer = asyncio.create_task(consume())
    await asyncio.sleep(0)
    channel.publish("x")
    await asyncio.sleep(0)
    channel.publish("y")
    channel.close()

    assert await asyncio.wait_for(consumer, timeout=1.0) == ["x", "y"]
