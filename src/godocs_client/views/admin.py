"""Maintenance views: manual ingestion, database cleanup, server info."""

from typing import Optional

from httpx import AsyncClient
from rich.console import Group, RenderableType
from rich.table import Table
from rich.text import Text

from godocs_client.api.clients import AdminClient
from godocs_client.config import GodocsConfig
from godocs_client.schemas import AboutInfo, CleanResult
from godocs_client.view import Idle, RemoteDataController
from godocs_client.views.base import View, error_text, loading_text

INGEST_SUCCESS_PREFIX = "Ingestion completed successfully! "
CLEAN_DEFAULT_MESSAGE = "Cleanup completed successfully!"

DATABASE_NAMES = {
    "postgres": "PostgreSQL",
    "cockroachdb": "CockroachDB",
    "sqlite": "SQLite",
}


class IngestView(View):
    """Triggers ingestion of the ingress folder on demand; nothing is fetched at mount."""

    name = "ingest"

    def __init__(self, http_client: AsyncClient, config: Optional[GodocsConfig] = None):
        super().__init__(http_client, config)
        self.client = AdminClient(http_client)
        self.data: RemoteDataController[str] = RemoteDataController(self.context, name="ingest")

    def controllers(self):
        return [self.data]

    def run(self):
        return self.data.start(self.client.ingest)

    def render(self) -> RenderableType:
        if isinstance(self.data.state, Idle):
            return Text("Run ingestion to import new documents from the ingress folder", style="dim")
        return self.data.render(
            loading=lambda: loading_text("Ingestion in progress..."),
            error=error_text,
            success=lambda text: Text(INGEST_SUCCESS_PREFIX + text, style="green"),
        )


def clean_summary(result: CleanResult) -> str:
    """One-line outcome of a cleanup run."""
    message = result.message or CLEAN_DEFAULT_MESSAGE

    details = []
    if result.deleted:
        details.append(f"Removed {result.deleted} orphaned database entries")
    if result.moved:
        details.append(f"Moved {result.moved} orphaned documents to ingress")

    if details:
        return f"{message} - {', '.join(details)}."
    return f"{message} - No issues found. Database is clean!"


class CleanView(View):
    """Runs the database cleanup on demand and reports what it changed."""

    name = "clean"

    def __init__(self, http_client: AsyncClient, config: Optional[GodocsConfig] = None):
        super().__init__(http_client, config)
        self.client = AdminClient(http_client)
        self.data: RemoteDataController[CleanResult] = RemoteDataController(
            self.context, name="clean"
        )

    def controllers(self):
        return [self.data]

    def run(self):
        return self.data.start(self.client.clean)

    def render(self) -> RenderableType:
        if isinstance(self.data.state, Idle):
            return Text(
                "Warning: cleanup permanently deletes database entries for missing files",
                style="yellow",
            )
        return self.data.render(
            loading=lambda: loading_text("Scanning documents and checking files..."),
            error=error_text,
            success=self._render_result,
        )

    def _render_result(self, result: CleanResult) -> RenderableType:
        return Group(
            Text(clean_summary(result), style="green"),
            Text(f"Scanned: {result.scanned or 0} documents"),
        )


def database_display(database_type: str) -> str:
    return DATABASE_NAMES.get(database_type, database_type)


def connection_type(info: AboutInfo) -> str:
    if info.is_ephemeral:
        return "Ephemeral (Temporary, On-Disk)"
    return "External (Persistent)"


def ocr_status(info: AboutInfo) -> str:
    return "Enabled" if info.ocr_configured else "Disabled"


class AboutView(View):
    name = "about"

    def __init__(self, http_client: AsyncClient, config: Optional[GodocsConfig] = None):
        super().__init__(http_client, config)
        self.client = AdminClient(http_client)
        self.data: RemoteDataController[AboutInfo] = RemoteDataController(
            self.context, name="about"
        )

    def controllers(self):
        return [self.data]

    async def on_mount(self) -> None:
        self.data.start(self.client.about)

    def render(self) -> RenderableType:
        return self.data.render(loading=loading_text, error=error_text, success=self._render_info)

    def _render_info(self, info: AboutInfo) -> RenderableType:
        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("Setting", style="bold")
        table.add_column("Value")

        rows = [
            ("Version", info.version),
            ("Database", database_display(info.database_type)),
            ("OCR Status", ocr_status(info)),
            ("Host", info.database_host),
            ("Port", info.database_port),
            ("Database Name", info.database_name),
            ("Connection Type", connection_type(info)),
        ]
        if info.ocr_configured:
            rows.append(("Tesseract Path", info.ocr_path))
        rows.append(("Document Storage Path", info.document_path))
        rows.append(("Ingestion Folder", info.ingress_path))

        for label, value in rows:
            table.add_row(label, Text(value))
        return table
