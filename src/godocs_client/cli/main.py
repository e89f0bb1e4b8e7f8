"""Main CLI entry point for godocs."""  # pragma: no cover

from godocs_client.cli.app import app  # pragma: no cover

# Register commands
from godocs_client.cli.commands import (  # noqa: F401  # pragma: no cover
    admin,
    config,
    documents,
    jobs,
    wordcloud,
)

if __name__ == "__main__":  # pragma: no cover
    app()
