#!/usr/bin/env python3
"""Apply Alembic migrations up to head, reporting failures to Logfire."""

import sys
import logfire
from alembic import command
from alembic.config import Config

from forum.config import Settings
from forum.util.logging import setup_logging
from forum.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    try:
        with logfire.span("Applying forum migrations", revision=revision):
            command.upgrade(Config("alembic.ini"), revision)
        logfire.info("Forum migrations applied", revision=revision)
        return 0

    except Exception as e:
        logfire.error(
            "Forum migration failed",
            revision=revision,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # The container must not start against a half-migrated schema
        raise


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
