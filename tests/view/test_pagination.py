"""Tests for PaginationController."""

import asyncio

import pytest

from godocs_client.errors import NetworkError
from godocs_client.schemas import PaginatedDocuments
from godocs_client.view import FetchError, PaginationController, Success, ViewContext
from payloads import page_json


class _Pages:
    """Stub page source recording which pages were requested."""

    def __init__(self, total_pages: int = 3):
        self.total_pages = total_pages
        self.requested: list[int] = []
        self.fail_next = False

    async def fetch(self, page: int) -> PaginatedDocuments:
        self.requested.append(page)
        if self.fail_next:
            self.fail_next = False
            raise NetworkError("Network error")
        names = [f"p{page}-doc{i}" for i in range(2)]
        return PaginatedDocuments.model_validate(page_json(page, self.total_pages, names))


@pytest.fixture
def pages():
    return _Pages()


async def _settle(pagination: PaginationController) -> None:
    await pagination.data.wait()


@pytest.mark.asyncio
async def test_go_to_replaces_documents(pages):
    context = ViewContext("home")
    context.mount()
    pagination = PaginationController(context, pages.fetch)

    pagination.go_to(1)
    await _settle(pagination)
    assert [d.name for d in pagination.documents] == ["p1-doc0", "p1-doc1"]

    pagination.go_to(2)
    await _settle(pagination)
    assert [d.name for d in pagination.documents] == ["p2-doc0", "p2-doc1"]
    assert pagination.current_page == 2
    assert pages.requested == [1, 2]
    await context.unmount()


@pytest.mark.asyncio
async def test_flags_come_from_server(pages):
    context = ViewContext("home")
    context.mount()
    pagination = PaginationController(context, pages.fetch)

    pagination.go_to(1)
    await _settle(pagination)
    assert pagination.has_next and not pagination.has_previous
    assert pagination.can_go_next and not pagination.can_go_previous
    assert not pagination.can_go_first and pagination.can_go_last

    pagination.go_to_last()
    await _settle(pagination)
    assert pagination.current_page == 3
    assert not pagination.has_next and pagination.has_previous
    assert pagination.can_go_first and not pagination.can_go_last
    await context.unmount()


@pytest.mark.asyncio
async def test_no_clamping(pages):
    """Out-of-range page numbers are sent as-is; the server decides."""
    context = ViewContext("home")
    context.mount()
    pagination = PaginationController(context, pages.fetch)

    pagination.go_to(1)
    await _settle(pagination)
    pagination.go_to_previous()
    await _settle(pagination)

    assert pages.requested == [1, 0]
    await context.unmount()


@pytest.mark.asyncio
async def test_navigation_disabled_while_loading(pages):
    context = ViewContext("home")
    context.mount()
    pagination = PaginationController(context, pages.fetch)
    pagination.go_to(1)
    await _settle(pagination)

    release = asyncio.Event()

    async def slow(page):
        await release.wait()
        return await pages.fetch(page)

    pagination._fetch_page = slow
    pagination.go_to_next()

    assert pagination.data.is_loading
    assert not pagination.can_go_next
    assert not pagination.can_go_previous
    assert not pagination.can_go_first
    assert not pagination.can_go_last
    # Totals of the last good page stay visible
    assert pagination.total_pages == 3

    release.set()
    await _settle(pagination)
    assert pagination.current_page == 2
    await context.unmount()


@pytest.mark.asyncio
async def test_first_next_previous(pages):
    context = ViewContext("home")
    context.mount()
    pagination = PaginationController(context, pages.fetch)

    pagination.go_to(2)
    await _settle(pagination)
    pagination.go_to_next()
    await _settle(pagination)
    pagination.go_to_first()
    await _settle(pagination)

    assert pages.requested == [2, 3, 1]
    assert isinstance(pagination.data.state, Success)
    await context.unmount()


@pytest.mark.asyncio
async def test_error_keeps_last_page(pages):
    context = ViewContext("home")
    context.mount()
    pagination = PaginationController(context, pages.fetch)
    pagination.go_to(1)
    await _settle(pagination)

    pages.fail_next = True
    pagination.go_to_next()
    await _settle(pagination)

    assert isinstance(pagination.data.state, FetchError)
    assert pagination.current_page == 1
    assert pagination.total_count == 60
    await context.unmount()
