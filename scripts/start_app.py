#!/usr/bin/env python3
"""Start the FastAPI application with Logfire error tracking for startup errors."""

import sys

import logfire
import uvicorn

from blog.config import Settings
from blog.util.error import ConfigurationError
from blog.util.logging import setup_logging
from blog.util.observability import configure_logfire

DEFAULT_JWT_SECRET = "CHANGE_ME_IN_PRODUCTION"


def check_settings(settings: Settings) -> None:
    """Refuse to serve production traffic with development defaults."""
    if settings.environment == "production":
        if settings.auth.jwt_secret == DEFAULT_JWT_SECRET:
            raise ConfigurationError("AUTH__JWT_SECRET", "must be set in production")
        if settings.debug:
            raise ConfigurationError("DEBUG", "must be off in production")


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    # Configure Logfire early to catch startup errors
    configure_logfire(settings)

    try:
        check_settings(settings)
        logfire.info("Starting FastAPI application", port=settings.port)

        uvicorn.run(
            "blog.interface.api.app:create_app",
            factory=True,
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
