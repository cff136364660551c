#!/usr/bin/env python3
"""Serve the API with uvicorn.

Logging and Logfire are configured before the app module is imported,
so failures while building the app are reported too.
"""

import sys

import logfire
import uvicorn

from knowspace.config import Settings
from knowspace.util.logging import setup_logging
from knowspace.util.observability import configure_logfire

APP = "knowspace.interface.api.app:app"


def main() -> int:
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    logfire.info(
        "Starting API",
        environment=settings.environment,
        port=settings.port,
        git_sha=settings.git_sha,
    )
    try:
        uvicorn.run(
            APP,
            host="0.0.0.0",
            port=settings.port,
            reload=settings.environment == "development",
            # TLS terminates at the proxy in staging and production
            proxy_headers=settings.environment in ("staging", "production"),
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
