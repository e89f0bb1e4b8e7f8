"""CLI tools for godocs."""
