#!/usr/bin/env python3
"""Serve the Tally API, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from tally.config import Settings
from tally.util.error import ConfigurationError
from tally.util.logging import setup_logging
from tally.util.observability import configure_logfire


DEFAULT_JWT_SECRET = "CHANGE_ME_IN_PRODUCTION"


def check_settings(settings: Settings) -> None:
    """Refuse to serve votes with a placeholder token secret.

    Raises:
        ConfigurationError: If AUTH__JWT_SECRET is unset outside development
    """
    if (
        settings.environment not in ("test", "development")
        and settings.auth.jwt_secret == DEFAULT_JWT_SECRET
    ):
        raise ConfigurationError(
            f"AUTH__JWT_SECRET must be set in {settings.environment}"
        )


def main() -> int:
    settings = Settings()

    # Logfire first, so a broken import of the app is still reported
    configure_logfire(settings)
    setup_logging(settings)

    try:
        check_settings(settings)
        logfire.info(
            "Starting Tally API",
            environment=settings.environment,
            port=settings.port,
        )
        uvicorn.run(
            "tally.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
        return 0

    except Exception as e:
        logfire.error(
            "Tally API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
