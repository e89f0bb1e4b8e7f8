"""Word cloud view: most frequent words, sized and colored by rank."""

import asyncio
from typing import List, Optional

from httpx import AsyncClient
from loguru import logger
from rich.console import Group, RenderableType
from rich.table import Table
from rich.text import Text

from godocs_client.api.clients import WordCloudClient
from godocs_client.config import GodocsConfig
from godocs_client.errors import GodocsError
from godocs_client.schemas import WordCloudResponse
from godocs_client.services.wordcloud_scaler import ScaledWord, scale_words
from godocs_client.view import RemoteDataController
from godocs_client.views.base import View, error_text, loading_text

RECALCULATION_STARTED = "Word cloud recalculation started. This may take a few moments."
RECALCULATION_FAILED = "Failed to trigger recalculation"
NO_DATA = "No word cloud data available.\nTry ingesting some documents first."

# Terminal output has no font sizes; words at or above this size are shown bold
BOLD_FONT_SIZE = 38.0


class WordCloudView(View):
    name = "wordcloud"

    def __init__(
        self,
        http_client: AsyncClient,
        config: Optional[GodocsConfig] = None,
        limit: Optional[int] = None,
        as_table: bool = False,
    ):
        super().__init__(http_client, config)
        self.client = WordCloudClient(http_client)
        self.limit = limit or self.config.wordcloud_limit
        self.as_table = as_table
        self.notice: Optional[str] = None
        self._reload_task: Optional[asyncio.Task] = None
        self.data: RemoteDataController[WordCloudResponse] = RemoteDataController(
            self.context, name="wordcloud"
        )

    def controllers(self):
        return [self.data]

    async def on_mount(self) -> None:
        self.refresh()

    async def on_unmount(self) -> None:
        if self._reload_task is not None and not self._reload_task.done():
            self._reload_task.cancel()
            try:
                await self._reload_task
            except asyncio.CancelledError:
                pass
        self._reload_task = None

    def refresh(self):
        return self.data.start(lambda: self.client.get(self.limit))

    @property
    def words(self) -> List[ScaledWord]:
        response = self.data.payload
        return scale_words(response.words) if response else []

    async def recalculate(self, reload_delay: Optional[float] = None) -> bool:
        """Ask the server to rebuild the word cloud, then reload after a delay.

        Returns:
            True if the server accepted the request
        """
        delay = self.config.wordcloud_reload_delay if reload_delay is None else reload_delay
        try:
            await self.client.recalculate()
        except GodocsError as e:
            logger.error(f"Word cloud recalculation failed: {e}")
            self.context.dispatch(lambda: self._set_notice(RECALCULATION_FAILED))
            return False

        self.context.dispatch(lambda: self._set_notice(RECALCULATION_STARTED))
        self._reload_task = asyncio.create_task(self._reload_later(delay), name="wordcloud-reload")
        return True

    async def wait_for_reload(self) -> None:
        """Wait for a pending post-recalculation reload and its commit."""
        if self._reload_task is not None:
            await self._reload_task
        await self.data.wait()

    async def _reload_later(self, delay: float) -> None:
        await asyncio.sleep(delay)
        if self.mounted:
            self.refresh()

    def _set_notice(self, notice: str) -> None:
        self.notice = notice
        self.context.request_render()

    def render(self) -> RenderableType:
        body = self.data.render(
            loading=lambda: loading_text("Loading word cloud..."),
            error=error_text,
            success=self._render_cloud,
        )
        if self.notice:
            return Group(Text(self.notice, style="cyan"), body)
        return body

    def _render_cloud(self, response: WordCloudResponse) -> RenderableType:
        words = scale_words(response.words)
        if not words:
            return Text(NO_DATA, style="dim")

        parts: list[RenderableType] = []
        if response.metadata is not None:
            meta = response.metadata
            parts.append(
                Text(
                    f"{meta.total_words_indexed} words indexed across "
                    f"{meta.total_docs_processed} documents "
                    f"(last calculated {meta.last_calculation or 'never'})",
                    style="dim",
                )
            )

        if self.as_table:
            table = Table(show_header=True, header_style="bold")
            table.add_column("Word")
            table.add_column("Frequency", justify="right")
            table.add_column("Font size", justify="right")
            table.add_column("Color")
            for word in words:
                table.add_row(
                    Text(word.word, style=word.color.to_hex()),
                    str(word.frequency),
                    f"{word.font_size:.1f}px",
                    word.color.css(),
                )
            parts.append(table)
        else:
            cloud = Text()
            for word in words:
                style = word.color.to_hex()
                if word.font_size >= BOLD_FONT_SIZE:
                    style = f"bold {style}"
                cloud.append(word.word, style=style)
                cloud.append("  ")
            parts.append(cloud)

        return Group(*parts)
