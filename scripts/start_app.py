#!/usr/bin/env python3
"""Start the forum API under uvicorn, reporting startup failures to Logfire."""

import sys
import logfire
import uvicorn

from forum.config import Settings
from forum.util.logging import setup_logging
from forum.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting forum API",
            environment=settings.environment,
            git_sha=settings.git_sha,
            port=settings.port,
        )
        # Importing the app configures Logfire again, which is a no-op
        uvicorn.run(
            "forum.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
        return 0

    except Exception as e:
        logfire.error(
            "Forum API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
