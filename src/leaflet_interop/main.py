"""Command-line entry point."""

import logging
import sys

from leaflet_interop.config import settings


def setup_logging() -> None:
    """Configure logging for the command-line tool."""
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )


def run() -> None:
    """Log the configured initial map view."""
    setup_logging()
    logger = logging.getLogger(__name__)
    logger.info(
        "Map %s centered at %s (zoom %d)",
        settings.map_id,
        settings.center,
        settings.zoom,
    )


if __name__ == "__main__":
    run()
