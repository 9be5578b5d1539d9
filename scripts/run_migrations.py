#!/usr/bin/env python3
"""Upgrade the feedback wall schema to the latest revision."""

import sys

import logfire
from alembic import command
from alembic.config import Config
from sqlalchemy.engine import make_url

from wall.config import Settings
from wall.util.logging import setup_logging
from wall.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    target = make_url(settings.database_url)
    with logfire.span(
        "alembic upgrade head", host=target.host, database=target.database
    ):
        try:
            # migrations/env.py takes the URL from Settings
            command.upgrade(Config("alembic.ini"), "head")
        except Exception:
            logfire.exception("Migration failed", database=target.database)
            raise

    logfire.info("Schema is at head", database=target.database)
    return 0


if __name__ == "__main__":
    sys.exit(main())
