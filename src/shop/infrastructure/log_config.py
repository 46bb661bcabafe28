"""Logging setup shared by the CLI and the HTTP app."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # SQL echo goes through the engine's own flag, not the root level.
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
