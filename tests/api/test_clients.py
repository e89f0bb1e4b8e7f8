"""Tests for typed API clients."""

from unittest.mock import MagicMock

import httpx
import pytest

from godocs_client.api.clients import (
    AdminClient,
    DocumentClient,
    JobClient,
    SearchClient,
    WordCloudClient,
)
from godocs_client.api.clients.search import EMPTY_TERM_MESSAGE
from godocs_client.errors import HTTPStatusError, NetworkError, ParseError, ValidationError
from payloads import job_json, page_json, tree_node


def _refuse(request):
    raise httpx.ConnectError("connection refused", request=request)


class TestDocumentClient:
    def test_init(self):
        mock_http = MagicMock()
        client = DocumentClient(mock_http)
        assert client.http_client is mock_http
        assert client._base_path == "/api/documents"

    @pytest.mark.asyncio
    async def test_filesystem(self, fake_api, http_client):
        fake_api.get(
            "/api/documents/filesystem",
            json={"fileSystem": [tree_node("root", None, True)], "error": ""},
        )

        response = await DocumentClient(http_client).filesystem()

        assert [node.id for node in response.file_system] == ["root"]

    @pytest.mark.asyncio
    async def test_latest_sends_page(self, fake_api, http_client):
        fake_api.get("/api/documents/latest", json=page_json(3, 5, ["a.pdf"]))

        page = await DocumentClient(http_client).latest(page=3)

        assert page.page == 3
        assert fake_api.requests[0].url.params["page"] == "3"

    @pytest.mark.asyncio
    async def test_latest_invalid_json(self, fake_api, http_client):
        fake_api.get("/api/documents/latest", text="not json")

        with pytest.raises(ParseError):
            await DocumentClient(http_client).latest()


class TestSearchClient:
    @pytest.mark.asyncio
    async def test_search_escapes_term(self, fake_api, http_client):
        fake_api.get("/api/search", json={"fileSystem": [], "error": ""})

        await SearchClient(http_client).search("tax & fees")

        assert fake_api.requests[0].url.params["term"] == "tax & fees"

    @pytest.mark.asyncio
    async def test_no_content_is_empty(self, fake_api, http_client):
        fake_api.add("GET", "/api/search", handler=lambda request: httpx.Response(204))

        response = await SearchClient(http_client).search("nothing")

        assert response.file_system == []
        assert response.search_hits() == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("term", ["", "   "])
    async def test_blank_term_sends_nothing(self, fake_api, http_client, term):
        with pytest.raises(ValidationError) as exc_info:
            await SearchClient(http_client).search(term)

        assert str(exc_info.value) == EMPTY_TERM_MESSAGE
        assert fake_api.requests == []


class TestWordCloudClient:
    @pytest.mark.asyncio
    async def test_get_sends_limit(self, fake_api, http_client):
        fake_api.get(
            "/api/wordcloud",
            json={"words": [{"word": "tax", "frequency": 3}], "metadata": None, "count": 1},
        )

        response = await WordCloudClient(http_client).get(limit=10)

        assert response.words[0].word == "tax"
        assert fake_api.requests[0].url.params["limit"] == "10"

    @pytest.mark.asyncio
    async def test_recalculate_posts(self, fake_api, http_client):
        fake_api.post("/api/wordcloud/recalculate", json={"status": "started"})

        await WordCloudClient(http_client).recalculate()

        assert fake_api.requests[0].method == "POST"


class TestJobClient:
    @pytest.mark.asyncio
    async def test_list(self, fake_api, http_client):
        fake_api.get("/api/jobs", json=[job_json("1"), job_json("2", status="completed")])

        jobs = await JobClient(http_client).list(limit=5)

        assert [job.id for job in jobs] == ["1", "2"]
        assert fake_api.requests[0].url.params["limit"] == "5"

    @pytest.mark.asyncio
    async def test_list_null(self, fake_api, http_client):
        fake_api.get("/api/jobs", text="null")

        assert await JobClient(http_client).list() == []

    @pytest.mark.asyncio
    async def test_active_count(self, fake_api, http_client):
        fake_api.get("/api/jobs/active", json=[job_json("1"), job_json("2"), job_json("3")])

        assert await JobClient(http_client).active_count() == 3


class TestAdminClient:
    @pytest.mark.asyncio
    async def test_ingest_returns_text(self, fake_api, http_client):
        fake_api.post("/api/ingest", text="3 documents imported")

        assert await AdminClient(http_client).ingest() == "3 documents imported"

    @pytest.mark.asyncio
    async def test_ingest_failure_message(self, fake_api, http_client):
        fake_api.post("/api/ingest", status_code=500, text="ingress folder missing")

        with pytest.raises(HTTPStatusError) as exc_info:
            await AdminClient(http_client).ingest()

        assert str(exc_info.value) == "Ingestion failed: ingress folder missing"

    @pytest.mark.asyncio
    async def test_ingest_network_message(self, fake_api, http_client):
        fake_api.post("/api/ingest", handler=_refuse)

        with pytest.raises(NetworkError) as exc_info:
            await AdminClient(http_client).ingest()

        assert str(exc_info.value) == "Network error: Could not connect to server"

    @pytest.mark.asyncio
    async def test_clean_result(self, fake_api, http_client):
        fake_api.post("/api/clean", json={"deleted": 2, "scanned": 40, "moved": 1})

        result = await AdminClient(http_client).clean()

        assert (result.deleted, result.scanned, result.moved) == (2, 40, 1)
        assert result.message is None

    @pytest.mark.asyncio
    async def test_clean_empty_body(self, fake_api, http_client):
        fake_api.add("POST", "/api/clean", handler=lambda request: httpx.Response(200))

        result = await AdminClient(http_client).clean()

        assert result.deleted is None

    @pytest.mark.asyncio
    async def test_clean_failure_message(self, fake_api, http_client):
        fake_api.post("/api/clean", status_code=503, text="busy")

        with pytest.raises(HTTPStatusError) as exc_info:
            await AdminClient(http_client).clean()

        assert str(exc_info.value) == "Cleanup failed with status: 503"

    @pytest.mark.asyncio
    async def test_about(self, fake_api, http_client):
        fake_api.get("/api/about", json={"version": "2.1", "databaseType": "postgres"})

        info = await AdminClient(http_client).about()

        assert info.version == "2.1"
        assert info.database_type == "postgres"
