"""Process-wide logging setup."""

from __future__ import annotations

import logging

from meditation_server.core.config import Settings


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level, format=settings.logging.format)
    # SQL echo is governed by the database settings, keep the engine logger quiet otherwise
    if not settings.database.echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


__all__ = ["configure_logging"]
