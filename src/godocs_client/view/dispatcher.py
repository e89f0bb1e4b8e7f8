"""Serialized dispatch queue and mount lifecycle for one view.

Every state mutation and re-render of a view runs as a callback on its
Dispatcher. A single worker task drains the queue in FIFO order, so two
mutations of the same view never interleave, no matter how many requests
complete concurrently.
"""

import asyncio
from typing import Callable, List, Optional

from loguru import logger

Callback = Callable[[], None]


class Dispatcher:
    """FIFO queue of state-mutation callbacks, consumed by one worker task."""

    def __init__(self, name: str = "view"):
        self.name = name
        self._queue: asyncio.Queue[Callback] = asyncio.Queue()
        self._worker: Optional[asyncio.Task] = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def dispatch(self, callback: Callback) -> None:
        """Schedule ``callback`` to run after all previously dispatched callbacks."""
        if self._closed:
            logger.debug(f"Dispatcher {self.name} closed, dropping callback")
            return
        self._queue.put_nowait(callback)
        if self._worker is None or self._worker.done():
            self._worker = asyncio.create_task(self._run(), name=f"dispatch-{self.name}")

    async def _run(self) -> None:
        while True:
            callback = await self._queue.get()
            try:
                callback()
            except Exception:
                # One broken listener must not stall every later state commit
                logger.exception(f"Dispatched callback failed in {self.name}")
            finally:
                self._queue.task_done()

    async def drain(self) -> None:
        """Wait until every callback dispatched so far has run."""
        await self._queue.join()

    async def close(self) -> None:
        """Stop accepting callbacks and stop the worker."""
        self._closed = True
        # Drop anything still queued so drain() cannot block on it
        while not self._queue.empty():
            self._queue.get_nowait()
            self._queue.task_done()
        if self._worker is not None and not self._worker.done():
            self._worker.cancel()
            try:
                await self._worker
            except asyncio.CancelledError:
                pass
        self._worker = None


class ViewContext:
    """Shared per-view execution context: dispatcher, mounted flag, re-render hooks."""

    def __init__(self, name: str = "view"):
        self.name = name
        self.dispatcher = Dispatcher(name)
        self.mounted = False
        self._render_listeners: List[Callback] = []

    def mount(self) -> None:
        # A closed dispatcher never reopens; a remount gets a fresh queue
        if self.dispatcher.closed:
            self.dispatcher = Dispatcher(self.name)
        self.mounted = True
        logger.debug(f"Mounted view {self.name}")

    async def unmount(self) -> None:
        """Mark the view torn down; completions arriving later are dropped."""
        self.mounted = False
        await self.dispatcher.close()
        logger.debug(f"Unmounted view {self.name}")

    def dispatch(self, callback: Callback) -> None:
        self.dispatcher.dispatch(callback)

    def on_render(self, listener: Callback) -> None:
        """Register a listener run after every committed state change."""
        self._render_listeners.append(listener)

    def request_render(self) -> None:
        """Run re-render listeners. Only called from inside the dispatch queue."""
        for listener in list(self._render_listeners):
            listener()
