"""Browse view: the full document tree with expand/collapse."""

from typing import Optional

from httpx import AsyncClient
from rich.console import Group, RenderableType
from rich.text import Text

from godocs_client.api.clients import DocumentClient
from godocs_client.config import GodocsConfig
from godocs_client.schemas import FileSystemResponse
from godocs_client.services.tree_builder import (
    ExpandState,
    RenderedNode,
    TreeBuilder,
    to_rich_tree,
)
from godocs_client.view import RemoteDataController, Success
from godocs_client.views.base import View, error_text, loading_text

NO_DOCUMENTS = "No documents found"


class BrowseView(View):
    """Fetches /api/documents/filesystem and shows it as a collapsible tree.

    The expand state belongs to the view, not to the fetched data, so a
    refresh keeps whatever the user had opened.
    """

    name = "browse"

    def __init__(
        self,
        http_client: AsyncClient,
        config: Optional[GodocsConfig] = None,
        expand_root: bool = True,
        expand_all: bool = False,
    ):
        super().__init__(http_client, config)
        self.documents = DocumentClient(http_client)
        self.expand_state = ExpandState()
        self.expand_root = expand_root
        self.expand_all = expand_all
        self.tree: Optional[TreeBuilder] = None
        self.data: RemoteDataController[FileSystemResponse] = RemoteDataController(
            self.context, name="filesystem"
        )
        self.data.subscribe(self._on_state)

    def controllers(self):
        return [self.data]

    async def on_mount(self) -> None:
        self.refresh()

    def refresh(self):
        return self.data.start(self.documents.filesystem)

    def _on_state(self, state) -> None:
        if not isinstance(state, Success):
            return
        self.tree = TreeBuilder(state.payload.file_system, self.expand_state)
        root = self.tree.root
        if root is not None and self.expand_root:
            self.expand_state.expand(root.id)
        if self.expand_all:
            self.tree.expand_all()

    def toggle(self, node_id: str) -> bool:
        """Open or close a directory and re-render."""
        expanded = self.expand_state.toggle(node_id)
        self.context.dispatch(self.context.request_render)
        return expanded

    def rendered_tree(self) -> Optional[RenderedNode]:
        if self.tree is None:
            return None
        return self.tree.render()

    def render(self) -> RenderableType:
        return self.data.render(
            loading=loading_text,
            error=error_text,
            success=self._render_tree,
        )

    def _render_tree(self, response: FileSystemResponse) -> RenderableType:
        parts: list[RenderableType] = []
        if response.error:
            parts.append(Text(f"Warning: {response.error}", style="yellow"))

        rendered = self.rendered_tree()
        if rendered is None:
            parts.append(Text(NO_DOCUMENTS, style="dim"))
        else:
            parts.append(to_rich_tree(rendered))
        return Group(*parts)
