"""stdlib logging for adapter and library loggers.

Services and views use logfire; the realtime adapters and third-party
drivers go through ``logging`` and are routed here.
"""

import logging
import sys

from wall.config import Settings

_QUIET = ("asyncpg", "sqlalchemy")


def setup_logging(settings: Settings) -> None:
    """Route stdlib records to stdout at INFO, or DEBUG when ``DEBUG`` is set."""
    level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-7s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    for name in _QUIET:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("wall").setLevel(level)

    logging.getLogger(__name__).debug(
        "Logging ready for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
