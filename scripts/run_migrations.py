#!/usr/bin/env python3
"""Upgrade the Tally schema to the latest Alembic revision."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from tally.config import Settings
from tally.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    """Apply migrations up to the given revision.

    Args:
        revision: Target revision, the latest by default

    Returns:
        Process exit code
    """
    settings = Settings()
    configure_logfire(settings)

    with logfire.span("run_migrations", revision=revision):
        try:
            command.upgrade(Config("alembic.ini"), revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail the deploy rather than serve against a broken schema
            raise

    logfire.info("Database schema up to date", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
