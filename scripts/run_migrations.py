#!/usr/bin/env python3
"""Apply Alembic migrations up to head."""

import sys
import logfire
from alembic import command
from alembic.config import Config

from qna.config import Settings
from qna.util.observability import configure_logfire


def main() -> int:
    """Upgrade the schema and log any failure to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    with logfire.span("run_migrations", environment=settings.environment):
        try:
            # migrations/env.py reads the database URL from Settings
            command.upgrade(Config("alembic.ini"), "head")
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Don't let the API start against a half-migrated schema
            raise

    logfire.info("Database migrations completed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
