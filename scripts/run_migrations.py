#!/usr/bin/env python3
"""Bring the accounts schema up to date.

Usage: run_migrations.py [revision]   (default: head)

Exits non-zero on failure so a deploy stops before the app starts against
a stale schema.
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from onboard.config import Settings
from onboard.util.observability import configure_logfire

ROOT = Path(__file__).resolve().parent.parent


def main(argv: list[str]) -> int:
    settings = Settings()
    configure_logfire(settings)

    target = argv[1] if len(argv) > 1 else "head"
    config = Config(str(ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(ROOT / "migrations"))

    with logfire.span("migrations.upgrade", target=target):
        try:
            command.upgrade(config, target)
        except Exception:
            logfire.exception("Migration failed", target=target)
            raise

    logfire.info("Schema up to date", target=target)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
