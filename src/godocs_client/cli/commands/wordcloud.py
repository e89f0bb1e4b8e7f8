"""Word cloud commands."""

from typing import Optional

import typer

from godocs_client.cli.app import app
from godocs_client.cli.commands.command_utils import run_view
from godocs_client.views import WordCloudView


@app.command()
def wordcloud(
    limit: Optional[int] = typer.Option(
        None, "--limit", "-n", help="Number of words to show (default from config)", min=1
    ),
    table: bool = typer.Option(
        False, "--table", help="Show frequency, font size and color for each word"
    ),
):
    """Show the most frequent words across all documents."""
    run_view(lambda client, config: WordCloudView(client, config, limit=limit, as_table=table))


@app.command()
def recalculate(
    reload: bool = typer.Option(
        True, "--reload/--no-reload", help="Wait for the configured delay and show the new cloud"
    ),
):
    """Trigger a background recalculation of the word cloud."""
    accepted = True

    async def _recalculate(view: WordCloudView) -> None:
        nonlocal accepted
        accepted = await view.recalculate()
        if accepted and reload:
            await view.wait_for_reload()

    run_view(lambda client, config: WordCloudView(client, config), action=_recalculate)
    if not accepted:
        raise typer.Exit(1)
