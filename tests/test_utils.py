"""Tests for shared utilities."""

import pytest

from godocs_client.utils import config_dir_path, format_bytes


@pytest.mark.parametrize(
    "size,expected",
    [
        (0, "0 B"),
        (1023, "1023 B"),
        (1024, "1.0 KB"),
        (2048, "2.0 KB"),
        (1536, "1.5 KB"),
        (5 * 1024 * 1024, "5.0 MB"),
        (3 * 1024**3, "3.0 GB"),
    ],
)
def test_format_bytes(size, expected):
    assert format_bytes(size) == expected


def test_config_dir_uses_env_override(tmp_path, monkeypatch):
    monkeypatch.setenv("GODOCS_CONFIG_DIR", str(tmp_path / "custom"))
    assert config_dir_path() == tmp_path / "custom"


def test_config_dir_defaults_to_home(tmp_path, monkeypatch):
    monkeypatch.delenv("GODOCS_CONFIG_DIR", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    assert config_dir_path() == tmp_path / ".godocs"
