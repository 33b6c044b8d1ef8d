"""Logging setup shared by the API server and the CLI."""

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s - %(message)s"


def configure_logging(level: str = None):
    """Configure root logging once; LOG_LEVEL is used when level is not given."""
    level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
