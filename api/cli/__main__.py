"""CLI entry point for running as `python -m api.cli`.

Usage:
    python -m api.cli ingest          # Ingest INPUT_FILE_PATH
    python -m api.cli search "query"  # Full-text search
    python -m api.cli count           # Number of stored sentences
"""

import sys

from .commands import main as run_cli


def main():
    """Entry point for `python -m api.cli`."""
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
