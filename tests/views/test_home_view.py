"""Tests for the latest-documents view."""

import httpx
import pytest

from godocs_client.views import HomeView
from payloads import page_json, render_text

LATEST = "/api/documents/latest"


def _paged(request):
    page = int(request.url.params["page"])
    return httpx.Response(200, json=page_json(page, 3, [f"doc-{page}"], total_count=45))


@pytest.mark.asyncio
async def test_first_page_and_navigation(fake_api, http_client, app_config):
    fake_api.get(LATEST, handler=_paged)

    async with HomeView(http_client, app_config) as view:
        await view.wait()
        assert view.page_info() == "Showing page 1 of 3 (45 total documents)"
        text = render_text(view.render())
        assert "doc-1" in text
        assert "Next" in text
        assert "Previous" not in text

        view.pagination.go_to_next()
        await view.wait()
        assert [d.name for d in view.pagination.documents] == ["doc-2"]
        assert view.navigation_hint() == "« First | ‹ Previous | Page 2 of 3 | Next › | Last »"


@pytest.mark.asyncio
async def test_start_page(fake_api, http_client, app_config):
    fake_api.get(LATEST, handler=_paged)

    async with HomeView(http_client, app_config, page=3) as view:
        await view.wait()
        assert view.pagination.current_page == 3
        assert not view.pagination.can_go_next


@pytest.mark.asyncio
async def test_single_page_has_no_pagination(fake_api, http_client, app_config):
    fake_api.get(LATEST, json=page_json(1, 1, ["only.pdf"], total_count=1))

    async with HomeView(http_client, app_config) as view:
        await view.wait()
        text = render_text(view.render())

    assert "only.pdf" in text
    assert "Page 1 of 1" not in text


@pytest.mark.asyncio
async def test_empty(fake_api, http_client, app_config):
    fake_api.get(LATEST, json=page_json(1, 0, []))

    async with HomeView(http_client, app_config) as view:
        await view.wait()
        assert "No documents found." in render_text(view.render())


@pytest.mark.asyncio
async def test_parse_error(fake_api, http_client, app_config):
    fake_api.get(LATEST, json={"documents": []})

    async with HomeView(http_client, app_config) as view:
        await view.wait()
        assert "Error: Failed to parse response" in render_text(view.render())
