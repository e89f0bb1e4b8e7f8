"""Typed client for background job endpoints."""

from typing import List

from httpx import AsyncClient

from godocs_client.api.utils import call_get, parse_list
from godocs_client.schemas import Job


class JobClient:
    """Typed client for /api/jobs."""

    def __init__(self, http_client: AsyncClient):
        self.http_client = http_client
        self._base_path = "/api/jobs"

    async def list(self, limit: int = 50) -> List[Job]:
        """Fetch recent jobs, newest first.

        Raises:
            NetworkError, HTTPStatusError, ParseError: If the request fails
        """
        response = await call_get(self.http_client, self._base_path, params={"limit": limit})
        return parse_list(Job, response)

    async def active(self) -> List[Job]:
        """Fetch jobs that are pending or running.

        Raises:
            NetworkError, HTTPStatusError, ParseError: If the request fails
        """
        response = await call_get(self.http_client, f"{self._base_path}/active")
        return parse_list(Job, response)

    async def active_count(self) -> int:
        """Number of active jobs; only the length of the list is used."""
        return len(await self.active())
