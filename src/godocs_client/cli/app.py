from typing import Optional

import typer

from godocs_client import __version__
from godocs_client.config import init_cli_logging


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:  # pragma: no cover
        typer.echo(f"godocs-client version: {__version__}")
        raise typer.Exit()


app = typer.Typer(name="godocs", no_args_is_help=True)


@app.callback()
def app_callback(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Godocs - browse, search and maintain a godocs document server."""
    # File-only logging so stdout carries nothing but command output
    init_cli_logging()
