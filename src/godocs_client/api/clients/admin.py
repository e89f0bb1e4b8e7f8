"""Typed client for maintenance endpoints: ingest, clean, about."""

from httpx import AsyncClient

from godocs_client.api.utils import call_get, call_post, parse_json, parse_model
from godocs_client.errors import HTTPStatusError, NetworkError
from godocs_client.schemas import AboutInfo, CleanResult


class AdminClient:
    """Typed client for server maintenance operations."""

    def __init__(self, http_client: AsyncClient):
        self.http_client = http_client

    async def ingest(self) -> str:
        """Trigger ingestion of the ingress folder.

        Returns:
            The raw response text

        Raises:
            HTTPStatusError: With message "Ingestion failed: <body>" on non-2xx
            NetworkError: If no response was received
        """
        try:
            response = await call_post(self.http_client, "/api/ingest")
        except HTTPStatusError as e:
            raise HTTPStatusError(e.status_code, e.body, f"Ingestion failed: {e.body}") from e
        except NetworkError as e:
            raise NetworkError("Network error: Could not connect to server") from e
        return response.text

    async def clean(self) -> CleanResult:
        """Trigger removal of database entries for missing files.

        Raises:
            HTTPStatusError: With message "Cleanup failed with status: <code>" on non-2xx
            NetworkError, ParseError: If the request fails
        """
        try:
            response = await call_post(self.http_client, "/api/clean")
        except HTTPStatusError as e:
            raise HTTPStatusError(
                e.status_code, e.body, f"Cleanup failed with status: {e.status_code}"
            ) from e
        except NetworkError as e:
            raise NetworkError("Network error: Could not connect to server") from e
        # An empty or null body still means the cleanup ran
        if not response.content or parse_json(response) is None:
            return CleanResult()
        return parse_model(CleanResult, response)

    async def about(self) -> AboutInfo:
        """Fetch the server configuration snapshot.

        Raises:
            NetworkError, HTTPStatusError, ParseError: If the request fails
        """
        response = await call_get(self.http_client, "/api/about")
        return parse_model(AboutInfo, response)
