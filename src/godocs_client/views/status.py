"""Status line: frontend version plus a background-polled active job count."""

from datetime import date
from typing import Optional

from httpx import AsyncClient
from loguru import logger
from rich.text import Text

from godocs_client.api.clients import JobClient
from godocs_client.config import GodocsConfig
from godocs_client.errors import GodocsError
from godocs_client.view import PeriodicTask, start_polling, stop_polling
from godocs_client.views.base import View


class StatusLineView(View):
    """Shows "<version> | <date>" and, when jobs are running, how many.

    The count is refreshed once at mount and then every
    ``job_count_refresh_interval`` seconds. A failed refresh leaves the last
    known count in place.
    """

    name = "status-line"

    def __init__(self, http_client: AsyncClient, config: Optional[GodocsConfig] = None):
        super().__init__(http_client, config)
        self.client = JobClient(http_client)
        self.active_job_count = 0
        self._poller: Optional[PeriodicTask] = None

    async def on_mount(self) -> None:
        await self.refresh()
        if self._poller is None:
            self._poller = start_polling(
                self.config.job_count_refresh_interval, self.refresh, name="job-count"
            )

    async def on_unmount(self) -> None:
        await stop_polling(self._poller)
        self._poller = None

    @property
    def polling(self) -> bool:
        return self._poller is not None and self._poller.running

    async def refresh(self) -> None:
        try:
            count = await self.client.active_count()
        except GodocsError as e:
            logger.debug(f"Active job count unavailable, keeping {self.active_job_count}: {e}")
            return
        self.context.dispatch(lambda: self._set_count(count))

    def _set_count(self, count: int) -> None:
        self.active_job_count = count
        self.context.request_render()

    def version_info(self, today: Optional[date] = None) -> str:
        build_date = self.config.build_date or (today or date.today()).isoformat()
        info = f"{self.config.version} | {build_date}"
        if self.active_job_count > 0:
            plural = "s" if self.active_job_count > 1 else ""
            info += f" | {self.active_job_count} active job{plural}"
        return info

    def render(self) -> Text:
        return Text(self.version_info(), style="dim")
