r"""RemoteDataController: fetch lifecycle state machine for one dataset.

    Idle --start--> Loading --ok--> Success(payload)
                       |  \--failure--> FetchError(kind, message)
                       \--start (again)--> Loading (earlier request superseded)

Only the outcome of the most recently started request is ever committed.
Every start() bumps a generation counter; a completion whose generation is
no longer current is dropped, so a slow stale response can never overwrite
the state produced by a later, faster one. Commits run on the view's
Dispatcher and are suppressed once the view is unmounted.
"""

import asyncio
from typing import Awaitable, Callable, Generic, List, Optional, TypeVar

from loguru import logger

from godocs_client.errors import GodocsError
from godocs_client.view.dispatcher import ViewContext
from godocs_client.view.state import (
    FetchError,
    FetchState,
    Idle,
    Loading,
    Success,
    error_state,
    render_state,
)

T = TypeVar("T")
R = TypeVar("R")

Request = Callable[[], Awaitable[T]]
StateListener = Callable[[FetchState[T]], None]


class RemoteDataController(Generic[T]):
    """Owns the fetch lifecycle of one dataset and exposes one current FetchState."""

    def __init__(self, context: ViewContext, name: str = "data"):
        """Initialize the controller.

        Args:
            context: View context whose dispatcher serializes all commits
            name: Label used in log messages
        """
        self.context = context
        self.name = name
        self._state: FetchState[T] = Idle()
        self._generation = 0
        self._task: Optional[asyncio.Task] = None
        self._listeners: List[StateListener] = []

    @property
    def state(self) -> FetchState[T]:
        return self._state

    @property
    def generation(self) -> int:
        """Number of requests started (or failed locally) so far."""
        return self._generation

    @property
    def is_loading(self) -> bool:
        return isinstance(self._state, Loading)

    @property
    def payload(self) -> Optional[T]:
        """Payload of the current state when it is a Success, else None."""
        if isinstance(self._state, Success):
            return self._state.payload
        return None

    def subscribe(self, listener: StateListener) -> None:
        """Call ``listener(state)`` inside the dispatch queue after each transition."""
        self._listeners.append(listener)

    def start(self, request: Request) -> asyncio.Task:
        """Start a request, superseding any earlier one.

        The state becomes Loading immediately. The request runs as a task and
        its outcome is committed through the dispatcher only if no later
        start() or fail() happened in between.

        Args:
            request: Zero-argument coroutine function producing the payload

        Returns:
            The task running the request
        """
        if not self.context.mounted:
            logger.warning(f"{self.name}: start() on an unmounted view, result will be dropped")

        self._generation += 1
        generation = self._generation
        self._transition(Loading())
        logger.debug(f"{self.name}: started request generation={generation}")

        self._task = asyncio.create_task(
            self._fetch(generation, request), name=f"fetch-{self.name}-{generation}"
        )
        return self._task

    def fail(self, error: GodocsError) -> None:
        """Enter an error state without issuing a request.

        Used for validation failures detected before anything is sent. Any
        in-flight request is superseded.
        """
        self._generation += 1
        self._transition(error_state(error))

    async def _fetch(self, generation: int, request: Request) -> None:
        try:
            outcome: FetchState[T] = Success(await request())
        except GodocsError as e:
            logger.info(f"{self.name}: request generation={generation} failed: {e}")
            outcome = error_state(e)

        self.context.dispatch(lambda: self._commit(generation, outcome))

    def _commit(self, generation: int, outcome: FetchState[T]) -> None:
        if not self.context.mounted:
            logger.debug(f"{self.name}: view unmounted, dropping generation={generation}")
            return
        if generation != self._generation:
            logger.debug(
                f"{self.name}: dropping stale generation={generation} "
                f"(current={self._generation})"
            )
            return
        self._state = outcome
        self._notify()

    def _transition(self, state: FetchState[T]) -> None:
        # Synchronous state change; listeners and re-render still go through the queue
        self._state = state
        self.context.dispatch(self._notify)

    def _notify(self) -> None:
        state = self._state
        for listener in list(self._listeners):
            listener(state)
        self.context.request_render()

    async def wait(self) -> None:
        """Wait for the latest request to finish and its commit to run.

        Re-checks after draining in case a listener started another request.
        """
        while True:
            task = self._task
            if task is not None:
                await task
            await self.context.dispatcher.drain()
            if task is self._task:
                return

    def render(
        self,
        *,
        loading: Callable[[], R],
        error: Callable[[FetchError], R],
        success: Callable[[T], R],
    ) -> R:
        """Render the current state through exactly one of three branches."""
        return render_state(self._state, loading=loading, error=error, success=success)
