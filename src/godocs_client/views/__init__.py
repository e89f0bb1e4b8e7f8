"""Views: one per page of the document-management frontend.

Each view owns a ViewContext and one RemoteDataController per dataset,
mounts with ``async with``, and renders its current state as a rich
renderable.
"""

from godocs_client.views.admin import AboutView, CleanView, IngestView
from godocs_client.views.base import View
from godocs_client.views.browse import BrowseView
from godocs_client.views.home import HomeView
from godocs_client.views.jobs import JobsView
from godocs_client.views.search import SearchView
from godocs_client.views.status import StatusLineView
from godocs_client.views.wordcloud import WordCloudView

__all__ = [
    "View",
    "AboutView",
    "BrowseView",
    "CleanView",
    "HomeView",
    "IngestView",
    "JobsView",
    "SearchView",
    "StatusLineView",
    "WordCloudView",
]
