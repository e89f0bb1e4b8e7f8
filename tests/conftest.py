"""Common test fixtures."""

import os
from pathlib import Path

import httpx
import pytest
import pytest_asyncio

from godocs_client.config import GodocsConfig, reset_config_cache
from payloads import API_BASE_URL, FakeApi


@pytest.fixture(autouse=True)
def config_home(tmp_path, monkeypatch) -> Path:
    """Isolate HOME, the config directory and GODOCS_* variables for every test."""
    monkeypatch.setenv("HOME", str(tmp_path))
    if os.name == "nt":
        monkeypatch.setenv("USERPROFILE", str(tmp_path))
    monkeypatch.setenv("GODOCS_CONFIG_DIR", str(tmp_path / ".godocs"))
    for name in list(os.environ):
        if name.startswith("GODOCS_") and name != "GODOCS_CONFIG_DIR":
            monkeypatch.delenv(name, raising=False)

    reset_config_cache()
    yield tmp_path
    reset_config_cache()


@pytest.fixture
def app_config() -> GodocsConfig:
    return GodocsConfig(
        api_url=API_BASE_URL,
        request_timeout=5.0,
        jobs_refresh_interval=0.01,
        job_count_refresh_interval=0.01,
        wordcloud_reload_delay=0.0,
        version="1.2.3",
        build_date="2024-05-01",
    )


@pytest.fixture
def fake_api() -> FakeApi:
    return FakeApi()


@pytest_asyncio.fixture
async def http_client(fake_api):
    async with httpx.AsyncClient(
        transport=httpx.MockTransport(fake_api), base_url=API_BASE_URL
    ) as client:
        yield client

