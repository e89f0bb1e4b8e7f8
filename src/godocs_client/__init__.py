"""godocs-client - async client and terminal views for the godocs document service."""

__version__ = "0.3.0"
