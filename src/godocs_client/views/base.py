"""Shared plumbing for godocs views.

A view owns one ViewContext (dispatch queue + mounted flag) and any number
of RemoteDataControllers. Subclasses hook into mount/unmount and produce a
rich renderable from their current state.
"""

from typing import Optional

from httpx import AsyncClient
from rich.console import RenderableType
from rich.text import Text

from godocs_client.config import ConfigManager, GodocsConfig
from godocs_client.view import FetchError, RemoteDataController, ViewContext


def loading_text(message: str = "Loading...") -> Text:
    return Text(message, style="dim")


def error_text(error: FetchError) -> Text:
    return Text(f"Error: {error.message}", style="red")


class View:
    """Base class for views. Use as an async context manager to mount/unmount."""

    name = "view"

    def __init__(self, http_client: AsyncClient, config: Optional[GodocsConfig] = None):
        self.http_client = http_client
        self.config = config or ConfigManager().config
        self.context = ViewContext(self.name)

    @property
    def mounted(self) -> bool:
        return self.context.mounted

    async def mount(self) -> None:
        self.context.mount()
        await self.on_mount()

    async def unmount(self) -> None:
        await self.on_unmount()
        await self.context.unmount()

    async def on_mount(self) -> None:
        """Called after the view is marked mounted. Kick off initial fetches here."""

    async def on_unmount(self) -> None:
        """Called before the dispatch queue closes. Stop pollers here."""

    def controllers(self) -> list[RemoteDataController]:
        return []

    async def wait(self) -> None:
        """Wait until every controller's latest request has been committed."""
        for controller in self.controllers():
            await controller.wait()
        await self.context.dispatcher.drain()

    def render(self) -> RenderableType:
        raise NotImplementedError

    async def __aenter__(self):
        await self.mount()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.unmount()
