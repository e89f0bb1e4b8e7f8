"""Configuration management for godocs-client."""

import json
import os
from pathlib import Path
from typing import Any, Optional

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from godocs_client.utils import config_dir_path, setup_logging

CONFIG_FILE_NAME = "config.json"
ENV_PREFIX = "GODOCS_"


class GodocsConfig(BaseSettings):
    """Pydantic model for godocs-client configuration."""

    api_url: str = Field(
        default="http://localhost:8000",
        description="Base URL of the godocs API. Empty string means same-origin relative URLs.",
    )
    request_timeout: float = Field(
        default=30.0,
        description="Seconds to wait for an API response before giving up",
        gt=0,
    )

    # overridden by ~/.godocs/config.json
    log_level: str = "INFO"

    # Polling configuration
    jobs_refresh_interval: float = Field(
        default=2.0,
        description="Seconds between job list refreshes while auto-refresh is enabled",
        gt=0,
    )
    job_count_refresh_interval: float = Field(
        default=5.0,
        description="Seconds between background refreshes of the active job count",
        gt=0,
    )
    jobs_list_limit: int = Field(
        default=50,
        description="Maximum number of jobs requested for the jobs view",
        gt=0,
    )

    # Word cloud configuration
    wordcloud_limit: int = Field(
        default=100,
        description="Number of words requested for the word cloud",
        gt=0,
    )
    wordcloud_reload_delay: float = Field(
        default=5.0,
        description="Seconds to wait after triggering a recalculation before reloading the word cloud",
        ge=0,
    )

    version: str = Field(default="dev", description="Version label shown in the status line")
    build_date: str = Field(default="", description="Build date shown in the status line")

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
    )

    @field_validator("api_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Ensure no trailing slash so paths can be appended directly."""
        return v.rstrip("/")


# Module-level cache for configuration
_CONFIG_CACHE: Optional[GodocsConfig] = None


class ConfigManager:
    """Manages godocs-client configuration."""

    def __init__(self) -> None:
        """Initialize the configuration manager."""
        self.config_dir = config_dir_path()
        self.config_file = self.config_dir / CONFIG_FILE_NAME

        # Ensure config directory exists
        self.config_dir.mkdir(parents=True, exist_ok=True)

    @property
    def config(self) -> GodocsConfig:
        """Get configuration, loading it lazily if needed."""
        return self.load_config()

    def load_config(self) -> GodocsConfig:
        """Load configuration from file or create default.

        Environment variables take precedence over file config values.
        Uses module-level cache across ConfigManager instances.
        """
        global _CONFIG_CACHE

        if _CONFIG_CACHE is not None:
            return _CONFIG_CACHE

        if not self.config_file.exists():
            config = GodocsConfig()
            self.save_config(config)
            return config

        try:
            file_data: dict[str, Any] = json.loads(self.config_file.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:  # pragma: no cover
            logger.error(f"Invalid JSON in config file {self.config_file}: {e}")
            raise SystemExit(
                f"Error: config file is not valid JSON: {self.config_file}\n"
                f"  {e}\n"
                f"Fix or delete the file and re-run."
            )

        # Env vars win: overlay every field whose GODOCS_* variable is set
        env_dict = GodocsConfig().model_dump()
        merged_data = file_data.copy()
        for field_name in GodocsConfig.model_fields.keys():
            if f"{ENV_PREFIX}{field_name.upper()}" in os.environ:
                merged_data[field_name] = env_dict[field_name]

        _CONFIG_CACHE = GodocsConfig(**merged_data)
        return _CONFIG_CACHE

    def save_config(self, config: GodocsConfig) -> None:
        """Save configuration to file and invalidate cache."""
        global _CONFIG_CACHE
        save_godocs_config(self.config_file, config)
        _CONFIG_CACHE = None

    def set_api_url(self, api_url: str) -> GodocsConfig:
        """Persist a new API base URL."""
        config = self.load_config().model_copy(update={"api_url": api_url.rstrip("/")})
        self.save_config(config)
        return config


def save_godocs_config(file_path: Path, config: GodocsConfig) -> None:
    """Save configuration to file."""
    try:
        file_path.write_text(json.dumps(config.model_dump(mode="json"), indent=2))
    except OSError as e:  # pragma: no cover
        logger.error(f"Failed to save config: {e}")


def reset_config_cache() -> None:
    """Drop the cached configuration so the next load re-reads file and environment."""
    global _CONFIG_CACHE
    _CONFIG_CACHE = None


def init_cli_logging() -> None:  # pragma: no cover
    """Initialize logging for CLI commands - file only.

    CLI commands should not log to stdout to avoid interfering with
    command output.
    """
    log_level = os.getenv("GODOCS_LOG_LEVEL", "INFO")
    setup_logging(log_level=log_level, log_to_file=True)
