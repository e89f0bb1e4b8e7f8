"""FetchState: the tagged state of one asynchronous data retrieval.

Exactly one of Idle, Loading, Success or FetchError holds at a time.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, TypeVar, Union

from godocs_client.errors import (
    GodocsError,
    HTTPStatusError,
    NetworkError,
    ParseError,
    ValidationError,
)

T = TypeVar("T")
R = TypeVar("R")


class ErrorKind(str, Enum):
    """Which part of a request failed."""

    NETWORK = "network"
    PARSE = "parse"
    HTTP_STATUS = "http_status"
    VALIDATION = "validation"


@dataclass(frozen=True)
class Idle:
    """Nothing has been requested yet."""


@dataclass(frozen=True)
class Loading:
    """A request is in flight."""


@dataclass(frozen=True)
class Success(Generic[T]):
    payload: T


@dataclass(frozen=True)
class FetchError:
    kind: ErrorKind
    message: str


FetchState = Union[Idle, Loading, Success[T], FetchError]


_ERROR_KINDS: dict[type[GodocsError], ErrorKind] = {
    NetworkError: ErrorKind.NETWORK,
    ParseError: ErrorKind.PARSE,
    HTTPStatusError: ErrorKind.HTTP_STATUS,
    ValidationError: ErrorKind.VALIDATION,
}


def error_state(error: GodocsError) -> FetchError:
    """Map an exception from the taxonomy onto its FetchError."""
    for error_type, kind in _ERROR_KINDS.items():
        if isinstance(error, error_type):
            return FetchError(kind=kind, message=str(error))
    raise TypeError(f"Unsupported error type: {type(error).__name__}")


def render_state(
    state: "FetchState[T]",
    *,
    loading: Callable[[], R],
    error: Callable[[FetchError], R],
    success: Callable[[T], R],
) -> R:
    """Render a FetchState through exactly one of three branches.

    Idle renders as loading: a view that has not fetched yet has nothing
    else to show.
    """
    match state:
        case Success(payload=payload):
            return success(payload)
        case FetchError():
            return error(state)
        case Idle() | Loading():
            return loading()
    raise TypeError(f"Unknown fetch state: {state!r}")
