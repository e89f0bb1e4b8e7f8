"""PaginationController: page navigation over a paged document listing.

Each page fetch replaces the whole visible document list. Whether a next
or previous page exists is read from the latest server response; the
controller never clamps page numbers itself.
"""

from typing import Awaitable, Callable, List

from loguru import logger

from godocs_client.schemas import Document, PaginatedDocuments
from godocs_client.view.controller import RemoteDataController
from godocs_client.view.dispatcher import ViewContext
from godocs_client.view.state import Success

PageFetcher = Callable[[int], Awaitable[PaginatedDocuments]]


class PaginationController:
    """Drives page-indexed re-fetches of a document listing."""

    def __init__(self, context: ViewContext, fetch_page: PageFetcher):
        """Initialize the pagination controller.

        Args:
            context: View context shared with the owning view
            fetch_page: Coroutine function returning one page for a page number
        """
        self.data: RemoteDataController[PaginatedDocuments] = RemoteDataController(
            context, name="latest-documents"
        )
        self._fetch_page = fetch_page
        self._last_page: PaginatedDocuments | None = None
        self.requested_page = 1
        self.data.subscribe(self._on_state)

    def _on_state(self, state) -> None:
        # Keep the last good page so totals stay visible while the next one loads
        if isinstance(state, Success):
            self._last_page = state.payload

    @property
    def page(self) -> PaginatedDocuments | None:
        """The most recently fetched page, kept across Loading and Error states."""
        return self._last_page

    @property
    def documents(self) -> List[Document]:
        page = self.page
        return list(page.documents) if page else []

    @property
    def current_page(self) -> int:
        page = self.page
        return page.page if page else self.requested_page

    @property
    def total_pages(self) -> int:
        page = self.page
        return page.total_pages if page else 0

    @property
    def total_count(self) -> int:
        page = self.page
        return page.total_count if page else 0

    @property
    def has_next(self) -> bool:
        page = self.page
        return bool(page and page.has_next)

    @property
    def has_previous(self) -> bool:
        page = self.page
        return bool(page and page.has_previous)

    # Action enablement mirrors the navigation buttons: disabled while loading

    @property
    def can_go_next(self) -> bool:
        return self.has_next and not self.data.is_loading

    @property
    def can_go_previous(self) -> bool:
        return self.has_previous and not self.data.is_loading

    @property
    def can_go_first(self) -> bool:
        return self.page is not None and self.current_page != 1 and not self.data.is_loading

    @property
    def can_go_last(self) -> bool:
        return (
            self.page is not None
            and self.current_page != self.total_pages
            and not self.data.is_loading
        )

    def go_to(self, page_number: int):
        """Fetch ``page_number``; on success it replaces the visible documents."""
        logger.debug(f"Navigating to page {page_number}")
        self.requested_page = page_number
        return self.data.start(lambda: self._fetch_page(page_number))

    def go_to_first(self):
        return self.go_to(1)

    def go_to_last(self):
        return self.go_to(self.total_pages)

    def go_to_next(self):
        return self.go_to(self.current_page + 1)

    def go_to_previous(self):
        return self.go_to(self.current_page - 1)
