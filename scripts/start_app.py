#!/usr/bin/env python3
"""Start the FastAPI application with Logfire error tracking for startup errors."""

import sys

import logfire
import uvicorn

from devfeed.config import Settings
from devfeed.util.error import ConfigurationError
from devfeed.util.logging import setup_logging
from devfeed.util.observability import configure_logfire

PLACEHOLDER_SECRET = "CHANGE_ME_IN_PRODUCTION"


def check_secrets(settings: Settings) -> None:
    """Refuse to start a production server with placeholder secrets.

    Raises:
        ConfigurationError: If a secret still has its default value
    """
    if settings.environment != "production":
        return

    if settings.auth.jwt_secret == PLACEHOLDER_SECRET:
        raise ConfigurationError("AUTH__JWT_SECRET", "must be set in production")
    if settings.generation.service_key == PLACEHOLDER_SECRET:
        raise ConfigurationError(
            "GENERATION__SERVICE_KEY", "must be set in production"
        )


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    # Configure Logfire early to catch startup errors
    configure_logfire(settings)
    setup_logging(settings)

    try:
        check_secrets(settings)

        logfire.info("Starting FastAPI application", environment=settings.environment)

        # This imports the app, which expects Logfire to be configured already
        uvicorn.run(
            "devfeed.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails properly
        raise


if __name__ == "__main__":
    sys.exit(main())
