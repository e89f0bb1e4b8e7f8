"""Pure derivations over fetched payloads: file tree and word cloud scaling."""
