"""Tests for explicit periodic task handles."""

import asyncio

import pytest

from godocs_client.view import PeriodicTask, start_polling, stop_polling


@pytest.mark.asyncio
async def test_ticks_until_stopped():
    ticks = 0
    reached = asyncio.Event()

    async def tick():
        nonlocal ticks
        ticks += 1
        if ticks >= 3:
            reached.set()

    handle = start_polling(0.001, tick, name="test")
    assert handle.running

    await asyncio.wait_for(reached.wait(), timeout=2)
    await stop_polling(handle)

    assert not handle.running
    stopped_at = ticks
    await asyncio.sleep(0.01)
    assert ticks == stopped_at


@pytest.mark.asyncio
async def test_first_tick_waits_one_interval(monkeypatch):
    slept = []

    async def fake_sleep(seconds):
        slept.append(seconds)
        raise asyncio.CancelledError

    monkeypatch.setattr(asyncio, "sleep", fake_sleep)
    ticks = []

    async def tick():
        ticks.append(1)

    handle = PeriodicTask(2.0, tick, name="jobs").start()
    with pytest.raises(asyncio.CancelledError):
        await handle._task

    assert slept == [2.0]
    assert ticks == []


def test_interval_must_be_positive():
    async def tick():
        pass

    with pytest.raises(ValueError):
        PeriodicTask(0, tick)


@pytest.mark.asyncio
async def test_start_only_once():
    async def tick():
        pass

    handle = start_polling(10, tick)
    with pytest.raises(RuntimeError):
        handle.start()
    await stop_polling(handle)

    with pytest.raises(RuntimeError):
        handle.start()


@pytest.mark.asyncio
async def test_stop_is_idempotent():
    async def tick():
        pass

    handle = start_polling(10, tick)
    await handle.stop()
    await handle.stop()
    assert not handle.running


@pytest.mark.asyncio
async def test_stop_polling_accepts_none():
    await stop_polling(None)
