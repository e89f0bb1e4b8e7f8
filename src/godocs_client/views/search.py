"""Search view: full-text search over document contents."""

from typing import List, Optional

from httpx import AsyncClient
from rich.console import Group, RenderableType
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from godocs_client.api.clients import SearchClient
from godocs_client.api.clients.search import EMPTY_TERM_MESSAGE
from godocs_client.config import GodocsConfig
from godocs_client.errors import ValidationError
from godocs_client.schemas import FileSystemResponse, TreeNode
from godocs_client.utils import format_bytes
from godocs_client.view import Idle, RemoteDataController
from godocs_client.views.base import View, error_text, loading_text


class SearchView(View):
    name = "search"

    def __init__(
        self, http_client: AsyncClient, config: Optional[GodocsConfig] = None, term: str = ""
    ):
        super().__init__(http_client, config)
        self.client = SearchClient(http_client)
        self.term = term
        self.data: RemoteDataController[FileSystemResponse] = RemoteDataController(
            self.context, name="search"
        )

    def controllers(self):
        return [self.data]

    async def on_mount(self) -> None:
        if self.term:
            self.search()

    def search(self, term: Optional[str] = None):
        """Run a search for ``term`` (or the current term).

        A blank term never reaches the server: the view goes straight to a
        validation error and None is returned instead of a task.
        """
        if term is not None:
            self.term = term
        query = self.term
        if not query.strip():
            self.data.fail(ValidationError(EMPTY_TERM_MESSAGE))
            return None
        return self.data.start(lambda: self.client.search(query))

    @property
    def results(self) -> List[TreeNode]:
        response = self.data.payload
        return response.search_hits() if response else []

    def render(self) -> RenderableType:
        if isinstance(self.data.state, Idle):
            return Text("Enter a search term to find documents", style="dim")
        return self.data.render(
            loading=lambda: loading_text("Searching..."),
            error=error_text,
            success=self._render_results,
        )

    def _render_results(self, response: FileSystemResponse) -> RenderableType:
        hits = response.search_hits()
        if not hits:
            return Text(f"No results found for: {self.term}", style="dim")

        table = Table(show_header=True, header_style="bold")
        table.add_column("Name")
        table.add_column("Size", justify="right")
        table.add_column("Modified")
        table.add_column("Path", style="dim")
        for node in hits:
            name = escape(node.name)
            if node.download_url:
                name = f"[link={node.download_url}]{name}[/link]"
            table.add_row(
                name,
                format_bytes(node.size) if node.is_file else "",
                node.mod_time,
                node.full_path or "",
            )
        return Group(Text(f"Found {len(hits)} results", style="bold"), table)
