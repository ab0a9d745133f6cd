#!/usr/bin/env python3
"""Start the FastAPI application with Logfire error tracking for startup errors."""

import sys
import logfire
import uvicorn

from devflow.config import Settings
from devflow.util.logging import setup_logging
from devflow.util.observability import configure_logfire


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    # Configure Logfire early to catch startup errors
    configure_logfire(settings)
    setup_logging(settings)

    try:
        logfire.info("Starting FastAPI application")

        # Start uvicorn server
        # This will import the app, which will try to configure Logfire again (no-op)
        uvicorn.run(
            "devflow.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="info",
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
