"""Shared helpers for CLI commands that print a view once."""

import asyncio
from typing import Awaitable, Callable, Optional, TypeVar

import typer
from httpx import AsyncClient
from loguru import logger
from rich.console import Console

from godocs_client.api.async_client import get_client
from godocs_client.config import ConfigManager, GodocsConfig
from godocs_client.view import FetchError
from godocs_client.views import View

console = Console()

V = TypeVar("V", bound=View)
ViewFactory = Callable[[AsyncClient, GodocsConfig], V]


def failed(view: View) -> bool:
    """True if any of the view's datasets ended in an error state."""
    return any(isinstance(controller.state, FetchError) for controller in view.controllers())


async def show_view(
    factory: ViewFactory,
    action: Optional[Callable[[V], Awaitable[None]]] = None,
    config: Optional[GodocsConfig] = None,
) -> bool:
    """Mount a view, let its fetches settle, print it once, unmount.

    Args:
        factory: Builds the view from an http client and the config
        action: Optional coroutine run against the mounted view before printing
        config: Configuration, loaded from ConfigManager when omitted

    Returns:
        True if every dataset of the view loaded successfully
    """
    config = config or ConfigManager().config
    async with get_client(config) as client:
        view = factory(client, config)
        async with view:
            await view.wait()
            if action is not None:
                await action(view)
                await view.wait()
            console.print(view.render())
            return not failed(view)


def run_view(
    factory: ViewFactory,
    action: Optional[Callable[[V], Awaitable[None]]] = None,
) -> None:
    """Synchronous wrapper for typer commands. Exits with status 1 on failure."""
    try:
        ok = asyncio.run(show_view(factory, action))
    except Exception as e:
        logger.error(f"Command failed: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if not ok:
        raise typer.Exit(1)
