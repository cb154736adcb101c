"""Standard library logging for the process.

Uvicorn, SQLAlchemy and alembic log through ``logging``; Logfire handles the
application's own events.
"""

import logging
import sys

from onboard.config import Settings

QUIET_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "uvicorn.access")


def setup_logging(settings: Settings) -> None:
    """Route library logs to stdout at a level matching ``settings.debug``."""
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger("onboard").setLevel(level)
