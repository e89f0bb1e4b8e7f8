"""Typed API clients for godocs endpoints.

Each client wraps one group of endpoints, builds their paths, and validates
responses into pydantic models. All of them share the error taxonomy in
godocs_client.errors through godocs_client.api.utils.
"""

from godocs_client.api.clients.admin import AdminClient
from godocs_client.api.clients.documents import DocumentClient
from godocs_client.api.clients.jobs import JobClient
from godocs_client.api.clients.search import SearchClient
from godocs_client.api.clients.wordcloud import WordCloudClient

__all__ = [
    "AdminClient",
    "DocumentClient",
    "JobClient",
    "SearchClient",
    "WordCloudClient",
]
