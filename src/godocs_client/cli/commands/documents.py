"""Document commands: browse the tree, search, list the latest documents."""

from typing import Annotated

import typer

from godocs_client.cli.app import app
from godocs_client.cli.commands.command_utils import run_view
from godocs_client.view import Idle
from godocs_client.views import BrowseView, HomeView, SearchView


@app.command()
def browse(
    expand_all: bool = typer.Option(
        False, "--expand-all", "-a", help="Expand every folder instead of only the root"
    ),
):
    """Show the document tree."""
    run_view(lambda client, config: BrowseView(client, config, expand_all=expand_all))


@app.command()
def search(
    term: Annotated[str, typer.Argument(help="Text to search for in document contents")],
):
    """Full-text search over all documents."""
    run_view(lambda client, config: SearchView(client, config, term=term), action=_search)


async def _search(view: SearchView) -> None:
    # An empty term never started a request at mount; surface it as a validation error
    if isinstance(view.data.state, Idle):
        view.search()


@app.command()
def latest(
    page: int = typer.Option(1, "--page", "-p", help="Page number to show", min=1),
):
    """List the most recently ingested documents."""
    run_view(lambda client, config: HomeView(client, config, page=page))
