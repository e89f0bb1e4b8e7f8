"""Error taxonomy for requests made against the godocs API.

Every failure a view can display is one of four kinds:
- NetworkError: the request never produced a response (connection, DNS, timeout)
- ParseError: the response body was not valid JSON or did not match its schema
- HTTPStatusError: the server answered with a non-2xx status
- ValidationError: the request was rejected locally before it was sent

None of these are retried automatically. Views surface ``str(error)`` verbatim.
"""


class GodocsError(Exception):
    """Base class for all client-side request failures."""


class NetworkError(GodocsError):
    """Transport failure: no response was received."""


class ParseError(GodocsError):
    """Malformed or schema-mismatched response payload."""


class HTTPStatusError(GodocsError):
    """Non-2xx response from the server."""

    def __init__(self, status_code: int, body: str = "", message: str | None = None):
        self.status_code = status_code
        self.body = body
        super().__init__(message or f"HTTP error: {status_code}")


class ValidationError(GodocsError):
    """Request rejected before any network traffic, e.g. an empty search term."""
