"""Stdlib logging setup.

Application events are emitted with logfire directly. This module covers
output from libraries that log through ``logging`` (uvicorn, alembic,
asyncpg), forwarding it to Logfire next to the application's spans.
"""

import logging

import logfire

from knowspace.config import Settings

# Libraries whose INFO output is noise next to Logfire's own tracing
QUIET_LOGGERS = ("sqlalchemy.engine", "asyncpg", "uvicorn.access")


def log_level(settings: Settings) -> int:
    """DEBUG when debugging, WARNING in production, INFO otherwise."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "production":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Route stdlib logging through Logfire once per process.

    Args:
        settings: Application settings
    """
    level = log_level(settings)
    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
