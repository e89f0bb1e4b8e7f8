"""Config commands: inspect and change the client configuration."""

from typing import Annotated

import typer
from rich.table import Table

from godocs_client.cli.app import app
from godocs_client.cli.commands.command_utils import console
from godocs_client.config import ConfigManager

config_app = typer.Typer(help="Show or change client configuration")
app.add_typer(config_app, name="config")


@config_app.command("show")
def show():
    """Print the effective configuration (file values overridden by GODOCS_* env vars)."""
    config_manager = ConfigManager()
    config = config_manager.config

    table = Table(title=f"Configuration ({config_manager.config_file})")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for name, value in config.model_dump().items():
        table.add_row(name, str(value))
    console.print(table)


@config_app.command("set-url")
def set_url(
    api_url: Annotated[str, typer.Argument(help="Base URL of the godocs server")],
):
    """Point the client at a different godocs server."""
    if api_url and not api_url.startswith(("http://", "https://")):
        console.print(f"[red]Error: URL must start with http:// or https://: {api_url}[/red]")
        raise typer.Exit(1)

    config = ConfigManager().set_api_url(api_url)
    console.print(f"[green]API URL set to {config.api_url or '<relative>'}[/green]")
