"""Home view: the most recently ingested documents, one page at a time."""

from typing import Optional

from httpx import AsyncClient
from rich.console import Group, RenderableType
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from godocs_client.api.clients import DocumentClient
from godocs_client.config import GodocsConfig
from godocs_client.schemas import PaginatedDocuments
from godocs_client.view import PaginationController
from godocs_client.views.base import View, error_text, loading_text

NO_DOCUMENTS = "No documents found."


class HomeView(View):
    name = "home"

    def __init__(
        self, http_client: AsyncClient, config: Optional[GodocsConfig] = None, page: int = 1
    ):
        super().__init__(http_client, config)
        self.documents = DocumentClient(http_client)
        self.initial_page = page
        self.pagination = PaginationController(self.context, self.documents.latest)

    def controllers(self):
        return [self.pagination.data]

    async def on_mount(self) -> None:
        self.pagination.go_to(self.initial_page)

    def page_info(self) -> str:
        p = self.pagination
        return f"Showing page {p.current_page} of {p.total_pages} ({p.total_count} total documents)"

    def navigation_hint(self) -> str:
        """Which navigation actions are currently available."""
        p = self.pagination
        actions = []
        if p.can_go_first:
            actions.append("« First")
        if p.can_go_previous:
            actions.append("‹ Previous")
        actions.append(f"Page {p.current_page} of {p.total_pages}")
        if p.can_go_next:
            actions.append("Next ›")
        if p.can_go_last:
            actions.append("Last »")
        return " | ".join(actions)

    def render(self) -> RenderableType:
        return self.pagination.data.render(
            loading=lambda: loading_text("Loading documents..."),
            error=error_text,
            success=self._render_page,
        )

    def _render_page(self, page: PaginatedDocuments) -> RenderableType:
        if not page.documents:
            return Text(NO_DOCUMENTS, style="dim")

        table = Table(show_header=True, header_style="bold")
        table.add_column("Name")
        table.add_column("Type")
        table.add_column("Ingested")
        table.add_column("Folder", style="dim")
        for document in page.documents:
            name = escape(document.name)
            if document.url:
                name = f"[link={document.url}]{name}[/link]"
            table.add_row(name, document.document_type, document.ingress_time, document.folder)

        parts: list[RenderableType] = [Text(self.page_info(), style="bold"), table]
        if page.total_pages > 1:
            parts.append(Text(self.navigation_hint(), style="cyan"))
        return Group(*parts)
