"""duckdash/debug.py — Debug flag from environment variable, logging setup."""

import logging
import os

DEBUG = os.environ.get("DUCKDASH_DEBUG", "") == "1"


def configure_logging() -> None:
    """Configure root logging once for the host and the CLI."""
    logging.basicConfig(
        level=logging.DEBUG if DEBUG else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
