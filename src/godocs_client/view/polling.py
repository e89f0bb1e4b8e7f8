"""Explicit, cancellable periodic tasks.

A view that polls in the background owns a PeriodicTask handle: it is
started at most once per mount and stopped exactly once at unmount.
"""

import asyncio
from typing import Awaitable, Callable, Optional

from loguru import logger

Tick = Callable[[], Awaitable[None]]


class PeriodicTask:
    """Run ``tick`` every ``interval`` seconds until stopped.

    The first tick happens one interval after start(); callers that want an
    immediate refresh do it themselves before starting the poller.
    """

    def __init__(self, interval: float, tick: Tick, name: str = "poll"):
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self.interval = interval
        self.name = name
        self._tick = tick
        self._task: Optional[asyncio.Task] = None
        self._stopped = False

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> "PeriodicTask":
        """Start ticking. A handle can be started only once."""
        if self._task is not None or self._stopped:
            raise RuntimeError(f"Periodic task {self.name} was already started")
        self._task = asyncio.create_task(self._run(), name=f"periodic-{self.name}")
        logger.debug(f"Started periodic task {self.name} every {self.interval}s")
        return self

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            await self._tick()

    async def stop(self) -> None:
        """Cancel the task and wait for it to finish. Safe to call twice."""
        if self._stopped:
            return
        self._stopped = True
        if self._task is not None and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
        logger.debug(f"Stopped periodic task {self.name}")


def start_polling(interval: float, tick: Tick, name: str = "poll") -> PeriodicTask:
    """Start a periodic task and return its handle."""
    return PeriodicTask(interval, tick, name=name).start()


async def stop_polling(handle: Optional[PeriodicTask]) -> None:
    """Stop a handle returned by start_polling. None is accepted and ignored."""
    if handle is not None:
        await handle.stop()
