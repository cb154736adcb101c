#!/usr/bin/env python3
"""Serve the invitation pages with uvicorn.

Logging and Logfire are set up before the app factory runs so that a
failure while building the app is reported too.
"""

import sys

import logfire
import uvicorn

from onboard.config import Settings
from onboard.util.logging import setup_logging
from onboard.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Starting onboard",
        base_url=settings.api.base_url,
        issuer=settings.auth.issuer_url,
        jwks_url=settings.auth.jwks_url,
    )

    try:
        uvicorn.run(
            "onboard.interface.api.app:create_app",
            factory=True,
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception:
        logfire.exception("onboard failed to start")
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
