"""Factory for the shared httpx client."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from httpx import AsyncClient, Timeout
from loguru import logger

from godocs_client.config import ConfigManager, GodocsConfig


def create_client(config: Optional[GodocsConfig] = None) -> AsyncClient:
    """Create an AsyncClient pointed at the configured API base URL.

    Args:
        config: Configuration to use, loaded from ConfigManager when omitted

    Returns:
        AsyncClient whose relative request paths resolve against ``config.api_url``
    """
    config = config or ConfigManager().config
    logger.debug(f"Creating API client for {config.api_url or '<relative>'}")
    return AsyncClient(
        base_url=config.api_url,
        timeout=Timeout(config.request_timeout),
        follow_redirects=True,
    )


@asynccontextmanager
async def get_client(config: Optional[GodocsConfig] = None) -> AsyncIterator[AsyncClient]:
    """Yield an AsyncClient and close it afterwards.

    Usage:
        async with get_client() as http_client:
            documents = DocumentClient(http_client)
            tree = await documents.filesystem()
    """
    client = create_client(config)
    try:
        yield client
    finally:
        await client.aclose()
