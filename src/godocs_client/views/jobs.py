"""Jobs view: recent background jobs with optional auto-refresh."""

import json
import re
from datetime import datetime, timezone
from typing import List, Optional

from httpx import AsyncClient
from loguru import logger
from rich.console import RenderableType
from rich.table import Table
from rich.text import Text

from godocs_client.api.clients import JobClient
from godocs_client.config import GodocsConfig
from godocs_client.schemas import Job, JobStatus, JobType
from godocs_client.view import (
    PeriodicTask,
    RemoteDataController,
    Success,
    start_polling,
    stop_polling,
)
from godocs_client.views.base import View, error_text, loading_text

JOB_TYPE_LABELS = {
    JobType.INGESTION.value: "Document Ingestion",
    JobType.CLEANUP.value: "Database Cleanup",
    JobType.WORDCLOUD.value: "Word Cloud Recalculation",
    JobType.SEARCH_REINDEX.value: "Search Reindex",
}

STATUS_STYLES = {
    JobStatus.PENDING.value: "yellow",
    JobStatus.RUNNING.value: "blue",
    JobStatus.COMPLETED.value: "green",
    JobStatus.FAILED.value: "red",
    JobStatus.CANCELLED.value: "dim",
}

NO_JOBS = "No jobs found"

# Fractional seconds beyond microseconds, as produced by Go's RFC 3339 encoder
_EXTRA_FRACTION = re.compile(r"(\.\d{6})\d+")


def format_job_type(job_type: str) -> str:
    """Human label for a job type; unknown types are title-cased."""
    return JOB_TYPE_LABELS.get(job_type, job_type.title())


def parse_timestamp(value: str) -> Optional[datetime]:
    """Parse an RFC 3339 timestamp. Naive values are taken as UTC."""
    try:
        parsed = datetime.fromisoformat(_EXTRA_FRACTION.sub(r"\1", value))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_time(value: str, now: Optional[datetime] = None) -> str:
    """Relative time for recent timestamps, absolute date otherwise.

    >>> format_time("2024-01-01T10:00:00Z", now=datetime(2024, 1, 1, 10, 5, tzinfo=timezone.utc))
    '5 minutes ago'
    """
    if not value:
        return ""
    parsed = parse_timestamp(value)
    if parsed is None:
        return value

    now = now or datetime.now(timezone.utc)
    seconds = (now - parsed).total_seconds()

    if seconds < 60:
        return "Just now"
    if seconds < 3600:
        minutes = int(seconds // 60)
        return "1 minute ago" if minutes == 1 else f"{minutes} minutes ago"
    if seconds < 86400:
        hours = int(seconds // 3600)
        return "1 hour ago" if hours == 1 else f"{hours} hours ago"

    hour = parsed.hour % 12 or 12
    return f"{parsed:%b} {parsed.day}, {parsed.year} at {hour}:{parsed:%M} {parsed:%p}"


def format_result(result: str) -> str:
    """Summarize a job's JSON result document. Non-JSON results are shown as-is."""
    try:
        data = json.loads(result)
    except ValueError:
        return result
    if not isinstance(data, dict):
        return result

    def count(key: str) -> Optional[float]:
        value = data.get(key)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        return value

    parts = []
    if (processed := count("filesProcessed")) is not None:
        parts.append(f"Processed: {processed:.0f} files")
    if (total := count("filesTotal")) is not None:
        parts.append(f"Total: {total:.0f}")
    if (errors := count("errors")) is not None and errors > 0:
        parts.append(f"Errors: {errors:.0f}")
    if (scanned := count("scanned")) is not None:
        parts.append(f"Scanned: {scanned:.0f}")
    if (deleted := count("deleted")) is not None and deleted > 0:
        parts.append(f"Deleted: {deleted:.0f}")
    if (moved := count("moved")) is not None and moved > 0:
        parts.append(f"Moved: {moved:.0f}")

    return ", ".join(parts) if parts else result


class JobsView(View):
    """Lists recent jobs and, while auto-refresh is on, re-fetches them periodically.

    The poller is started once at mount and stopped at unmount. Each tick
    checks the auto-refresh flag, so switching it off does not stop the task.
    """

    name = "jobs"

    def __init__(
        self,
        http_client: AsyncClient,
        config: Optional[GodocsConfig] = None,
        auto_refresh: bool = True,
    ):
        super().__init__(http_client, config)
        self.client = JobClient(http_client)
        self.auto_refresh = auto_refresh
        self.jobs: List[Job] = []
        self._poller: Optional[PeriodicTask] = None
        self.data: RemoteDataController[List[Job]] = RemoteDataController(
            self.context, name="jobs"
        )
        self.data.subscribe(self._on_state)

    def controllers(self):
        return [self.data]

    async def on_mount(self) -> None:
        self.refresh()
        if self._poller is None:
            self._poller = start_polling(
                self.config.jobs_refresh_interval, self._tick, name="jobs-refresh"
            )

    async def on_unmount(self) -> None:
        await stop_polling(self._poller)
        self._poller = None

    @property
    def polling(self) -> bool:
        return self._poller is not None and self._poller.running

    def refresh(self):
        return self.data.start(lambda: self.client.list(self.config.jobs_list_limit))

    def toggle_auto_refresh(self) -> bool:
        self.auto_refresh = not self.auto_refresh
        logger.debug(f"Jobs auto-refresh {'enabled' if self.auto_refresh else 'disabled'}")
        return self.auto_refresh

    async def _tick(self) -> None:
        if self.auto_refresh:
            self.refresh()

    def _on_state(self, state) -> None:
        # Keep the previous list on screen while a refresh is in flight
        if isinstance(state, Success):
            self.jobs = list(state.payload)

    def render(self) -> RenderableType:
        return self.data.render(
            loading=self._render_loading,
            error=error_text,
            success=self._render_jobs,
        )

    def _render_loading(self) -> RenderableType:
        if self.jobs:
            return self._render_jobs(self.jobs)
        return loading_text("Loading jobs...")

    def _render_jobs(self, jobs: List[Job]) -> RenderableType:
        if not jobs:
            return Text(NO_JOBS, style="dim")

        table = Table(show_header=True, header_style="bold")
        table.add_column("Type")
        table.add_column("Status")
        table.add_column("Progress", justify="right")
        table.add_column("Message")
        table.add_column("Created")
        table.add_column("Result")
        table.add_column("Completed")
        table.add_column("ID", style="dim")

        for job in jobs:
            status = Text(job.status, style=STATUS_STYLES.get(job.status, ""))
            progress = f"{job.progress}%"
            if job.status == JobStatus.RUNNING.value and job.current_step:
                progress = f"{progress} - {job.current_step}"
            message = f"Error: {job.error}" if job.error else job.message
            table.add_row(
                format_job_type(job.type),
                status,
                progress,
                Text(message),
                format_time(job.created_at),
                format_result(job.result) if job.result else "",
                format_time(job.completed_at or ""),
                job.id,
            )
        return table
