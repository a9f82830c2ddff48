"""
Thumbnail Worker Service.

Derives preview artifacts for one uploaded video asset per invocation:
- Staging the source object from storage into local temp files.
- Extracting a still thumbnail and, for long enough videos, a GIF clip.
- Recording the thumbnail against the asset and uploading both artifacts.
- Distributed tracing with Datadog.
- Structured JSON logging.

Usage: python main.py <asset_id>  (or set ASSET_ID)
"""

import os
import sys

import ddtrace.auto  # noqa: F401
from preview_common import setup_logging

from dependencies import get_worker

EXIT_USAGE = 2

logger = setup_logging()


def parse_asset_id(argv: list[str]) -> int | None:
    """Returns the asset id from argv[1] or ASSET_ID, or None if missing or invalid."""
    raw = argv[1] if len(argv) > 1 else os.getenv("ASSET_ID", "")
    try:
        return int(raw)
    except ValueError:
        return None


def main():
    """Runs the worker for the asset named on the command line."""
    asset_id = parse_asset_id(sys.argv)
    if asset_id is None:
        logger.error("No valid asset id supplied", extra={"argv": sys.argv[1:]})
        sys.exit(EXIT_USAGE)

    worker = get_worker()
    sys.exit(worker.run(asset_id))


if __name__ == "__main__":
    main()
