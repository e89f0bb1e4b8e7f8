"""Typed client for full-text search."""

from httpx import AsyncClient, codes

from godocs_client.api.utils import call_get, parse_model
from godocs_client.errors import ValidationError
from godocs_client.schemas import FileSystemResponse

EMPTY_TERM_MESSAGE = "Please enter a search term"


class SearchClient:
    """Typed client for /api/search."""

    def __init__(self, http_client: AsyncClient):
        self.http_client = http_client
        self._base_path = "/api/search"

    async def search(self, term: str) -> FileSystemResponse:
        """Search document text.

        Args:
            term: Search term, URL-escaped by httpx

        Returns:
            FileSystemResponse; empty when the server answers 204 No Content

        Raises:
            ValidationError: If the term is blank (no request is sent)
            NetworkError, HTTPStatusError, ParseError: If the request fails
        """
        if not term or not term.strip():
            raise ValidationError(EMPTY_TERM_MESSAGE)

        response = await call_get(self.http_client, self._base_path, params={"term": term})
        if response.status_code == codes.NO_CONTENT:
            return FileSystemResponse()
        return parse_model(FileSystemResponse, response)
