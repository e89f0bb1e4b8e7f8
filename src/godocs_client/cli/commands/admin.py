"""Maintenance commands: ingest, clean, about."""

from godocs_client.cli.app import app
from godocs_client.cli.commands.command_utils import run_view
from godocs_client.views import AboutView, CleanView, IngestView


async def _run_ingest(view: IngestView) -> None:
    view.run()


async def _run_clean(view: CleanView) -> None:
    view.run()


@app.command()
def ingest():
    """Import new documents from the server's ingress folder now."""
    run_view(lambda client, config: IngestView(client, config), action=_run_ingest)


@app.command()
def clean():
    """Remove database entries for missing files and requeue orphaned documents."""
    run_view(lambda client, config: CleanView(client, config), action=_run_clean)


@app.command()
def about():
    """Show the server's version, database, OCR and storage settings."""
    run_view(lambda client, config: AboutView(client, config))
