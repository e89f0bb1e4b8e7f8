"""Background job commands."""

import asyncio

import typer
from loguru import logger
from rich.console import Group
from rich.live import Live

from godocs_client.api.async_client import get_client
from godocs_client.cli.app import app
from godocs_client.cli.commands.command_utils import console, run_view
from godocs_client.config import ConfigManager
from godocs_client.views import JobsView, StatusLineView


async def watch_jobs() -> None:  # pragma: no cover
    """Keep the jobs table and status line on screen until interrupted."""
    config = ConfigManager().config
    async with get_client(config) as client:
        jobs_view = JobsView(client, config)
        status_view = StatusLineView(client, config)

        def render():
            return Group(status_view.render(), jobs_view.render())

        with Live(render(), console=console, refresh_per_second=4) as live:
            jobs_view.context.on_render(lambda: live.update(render()))
            status_view.context.on_render(lambda: live.update(render()))
            async with status_view, jobs_view:
                await asyncio.Event().wait()


@app.command()
def jobs(
    watch: bool = typer.Option(
        False, "--watch", "-w", help="Keep refreshing until interrupted with Ctrl+C"
    ),
):
    """List recent background jobs."""
    if not watch:
        run_view(lambda client, config: JobsView(client, config, auto_refresh=False))
        return

    try:
        asyncio.run(watch_jobs())
    except KeyboardInterrupt:  # pragma: no cover
        logger.debug("Job watch interrupted")


@app.command()
def status():
    """Show the version line and the number of active jobs."""
    run_view(lambda client, config: StatusLineView(client, config))
