#!/usr/bin/env python3
"""Apply pending schema migrations before the API starts."""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config
from sqlalchemy.engine import make_url

from blog.config import Settings
from blog.util.logging import setup_logging
from blog.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main() -> int:
    """Upgrade the database to the latest revision."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    database = make_url(settings.database_url)

    try:
        with logfire.span(
            "run_migrations", host=database.host, database=database.database
        ):
            alembic_cfg = Config(str(ALEMBIC_INI))
            command.upgrade(alembic_cfg, "head")

        logfire.info("Database migrations completed")
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Fail the container rather than serve against a stale schema
        raise


if __name__ == "__main__":
    sys.exit(main())
