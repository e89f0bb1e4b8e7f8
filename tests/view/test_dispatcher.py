"""Tests for the per-view dispatch queue."""

import pytest

from godocs_client.view import Dispatcher, ViewContext


@pytest.mark.asyncio
async def test_callbacks_run_in_order():
    dispatcher = Dispatcher("test")
    seen = []

    for i in range(5):
        dispatcher.dispatch(lambda i=i: seen.append(i))
    await dispatcher.drain()

    assert seen == [0, 1, 2, 3, 4]
    await dispatcher.close()


@pytest.mark.asyncio
async def test_failing_callback_does_not_stop_queue():
    dispatcher = Dispatcher("test")
    seen = []

    def boom():
        raise RuntimeError("listener bug")

    dispatcher.dispatch(boom)
    dispatcher.dispatch(lambda: seen.append("after"))
    await dispatcher.drain()

    assert seen == ["after"]
    await dispatcher.close()


@pytest.mark.asyncio
async def test_closed_dispatcher_drops_callbacks():
    dispatcher = Dispatcher("test")
    await dispatcher.close()
    seen = []

    dispatcher.dispatch(lambda: seen.append(1))
    await dispatcher.drain()

    assert seen == []


@pytest.mark.asyncio
async def test_callback_dispatching_more_work():
    dispatcher = Dispatcher("test")
    seen = []

    def first():
        seen.append("first")
        dispatcher.dispatch(lambda: seen.append("second"))

    dispatcher.dispatch(first)
    await dispatcher.drain()

    assert seen == ["first", "second"]
    await dispatcher.close()


@pytest.mark.asyncio
async def test_view_context_mount_cycle():
    context = ViewContext("test")
    renders = []
    context.on_render(lambda: renders.append(1))

    assert not context.mounted
    context.mount()
    assert context.mounted

    context.dispatch(context.request_render)
    await context.dispatcher.drain()
    assert renders == [1]

    await context.unmount()
    assert not context.mounted


@pytest.mark.asyncio
async def test_view_context_remount_gets_working_dispatcher():
    context = ViewContext("test")
    renders = []
    context.on_render(lambda: renders.append(1))

    context.mount()
    first = context.dispatcher
    await context.unmount()
    assert first.closed

    context.mount()
    assert context.mounted
    assert context.dispatcher is not first
    assert not context.dispatcher.closed

    context.dispatch(context.request_render)
    await context.dispatcher.drain()
    assert renders == [1]

    await context.unmount()
