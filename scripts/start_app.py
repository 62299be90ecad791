#!/usr/bin/env python3
"""Start the API server, reporting startup failures to Logfire."""

import sys
import logfire
import uvicorn

from qna.config import Settings
from qna.util.error import ConfigurationError
from qna.util.logging import setup_logging
from qna.util.observability import configure_logfire

DEFAULT_JWT_SECRET = "CHANGE_ME_IN_PRODUCTION"


def check_settings(settings: Settings) -> None:
    """Refuse to boot a production server with development secrets.

    Raises:
        ConfigurationError: If the JWT secret was never overridden
    """
    if (
        settings.environment == "production"
        and settings.auth.jwt_secret == DEFAULT_JWT_SECRET
    ):
        raise ConfigurationError("AUTH__JWT_SECRET must be set in production")


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    # Configure Logfire early to catch startup errors
    configure_logfire(settings)

    try:
        check_settings(settings)
        logfire.info("Starting Q&A API", port=settings.port)

        # Importing the app module builds the container; Logfire is already set up
        uvicorn.run(
            "qna.interface.api.app:app",
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
        # Re-raise so the process exits non-zero
        raise


if __name__ == "__main__":
    sys.exit(main())
