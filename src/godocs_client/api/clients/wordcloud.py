"""Typed client for word cloud endpoints."""

from httpx import AsyncClient
from loguru import logger

from godocs_client.api.utils import call_get, call_post, parse_model
from godocs_client.schemas import WordCloudResponse


class WordCloudClient:
    """Typed client for /api/wordcloud."""

    def __init__(self, http_client: AsyncClient):
        self.http_client = http_client
        self._base_path = "/api/wordcloud"

    async def get(self, limit: int = 100) -> WordCloudResponse:
        """Fetch the most frequent words.

        Args:
            limit: Maximum number of words to return

        Raises:
            NetworkError, HTTPStatusError, ParseError: If the request fails
        """
        response = await call_get(self.http_client, self._base_path, params={"limit": limit})
        return parse_model(WordCloudResponse, response)

    async def recalculate(self) -> None:
        """Ask the server to rebuild the word cloud in the background.

        The response body is not part of the contract and is ignored.

        Raises:
            NetworkError, HTTPStatusError: If the request fails
        """
        await call_post(self.http_client, f"{self._base_path}/recalculate")
        logger.info("Word cloud recalculation requested")
