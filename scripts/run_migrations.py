#!/usr/bin/env python3
"""Upgrade the database schema, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py [revision]

The revision defaults to ``head``.
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from knowspace.config import Settings
from knowspace.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main(argv: list[str] | None = None) -> int:
    """Upgrade to the requested revision."""
    args = sys.argv[1:] if argv is None else argv
    revision = args[0] if args else "head"

    settings = Settings()
    configure_logfire(settings)

    with logfire.span(
        "Database migration", revision=revision, environment=settings.environment
    ):
        try:
            command.upgrade(Config(str(ALEMBIC_INI)), revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # The container must not start against a half-migrated schema
            raise

    logfire.info("Database migrated", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main())
