"""Application layer: use cases, output formatting and the CLI."""
