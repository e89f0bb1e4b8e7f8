"""Typed client for document browsing endpoints.

Encapsulates /api/documents/* endpoints.
"""

from httpx import AsyncClient

from godocs_client.api.utils import call_get, parse_model
from godocs_client.schemas import FileSystemResponse, PaginatedDocuments


class DocumentClient:
    """Typed client for the document tree and latest-documents listing.

    Usage:
        async with get_client() as http_client:
            client = DocumentClient(http_client)
            page = await client.latest(page=2)
    """

    def __init__(self, http_client: AsyncClient):
        """Initialize the document client.

        Args:
            http_client: HTTPX AsyncClient for making requests
        """
        self.http_client = http_client
        self._base_path = "/api/documents"

    async def filesystem(self) -> FileSystemResponse:
        """Fetch the complete document tree as a flat node list.

        Raises:
            NetworkError, HTTPStatusError, ParseError: If the request fails
        """
        response = await call_get(self.http_client, f"{self._base_path}/filesystem")
        return parse_model(FileSystemResponse, response)

    async def latest(self, page: int = 1) -> PaginatedDocuments:
        """Fetch one page of the most recently ingested documents.

        Args:
            page: 1-based page number; the server decides what is in range

        Raises:
            NetworkError, HTTPStatusError, ParseError: If the request fails
        """
        response = await call_get(
            self.http_client,
            f"{self._base_path}/latest",
            params={"page": page},
        )
        return parse_model(PaginatedDocuments, response)
