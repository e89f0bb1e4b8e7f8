"""CLI commands for godocs."""

from godocs_client.cli.commands import admin, config, documents, jobs, wordcloud

__all__ = ["admin", "config", "documents", "jobs", "wordcloud"]
