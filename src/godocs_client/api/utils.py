"""Request helpers that translate httpx failures into the godocs error taxonomy.

Typed clients call these instead of using the AsyncClient directly so that
every endpoint reports failures the same way:
- httpx.RequestError        -> NetworkError
- non-2xx status            -> HTTPStatusError
- invalid JSON / bad schema -> ParseError (raised by parse_json / parse_model)
"""

import json
from typing import Any, Type, TypeVar

import httpx
from httpx import AsyncClient, Response
from loguru import logger
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from godocs_client.errors import HTTPStatusError, NetworkError, ParseError

ModelT = TypeVar("ModelT", bound=BaseModel)


async def _send(client: AsyncClient, method: str, url: str, **kwargs: Any) -> Response:
    try:
        response = await client.request(method, url, **kwargs)
    except httpx.RequestError as e:
        logger.warning(f"{method} {url} failed: {e!r}")
        raise NetworkError(f"Network error: {e}") from e

    if not response.is_success:
        body = response.text
        logger.warning(f"{method} {url} returned {response.status_code}")
        raise HTTPStatusError(response.status_code, body)

    logger.debug(f"{method} {url} -> {response.status_code}")
    return response


async def call_get(client: AsyncClient, url: str, **kwargs: Any) -> Response:
    """Issue a GET request.

    Raises:
        NetworkError: If no response was received
        HTTPStatusError: If the response status is not 2xx
    """
    return await _send(client, "GET", url, **kwargs)


async def call_post(client: AsyncClient, url: str, **kwargs: Any) -> Response:
    """Issue a POST request.

    Raises:
        NetworkError: If no response was received
        HTTPStatusError: If the response status is not 2xx
    """
    return await _send(client, "POST", url, **kwargs)


def parse_json(response: Response) -> Any:
    """Decode a response body as JSON.

    Raises:
        ParseError: If the body is not valid JSON
    """
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ParseError(f"Failed to parse response: {e}") from e


def parse_model(model: Type[ModelT], response: Response) -> ModelT:
    """Decode a response body and validate it against a pydantic model.

    Unknown fields are ignored by the models; missing required fields fail.

    Raises:
        ParseError: If the body is not valid JSON or does not match ``model``
    """
    data = parse_json(response)
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        raise ParseError(f"Failed to parse response: {e}") from e


def parse_list(model: Type[ModelT], response: Response) -> list[ModelT]:
    """Decode a JSON array of ``model`` items. A null body yields an empty list.

    Raises:
        ParseError: If the body is not valid JSON or an item does not match ``model``
    """
    data = parse_json(response)
    if data is None:
        return []
    try:
        return TypeAdapter(list[model]).validate_python(data)  # pyright: ignore[reportInvalidTypeForm]
    except PydanticValidationError as e:
        raise ParseError(f"Failed to parse response: {e}") from e
