"""Stdlib logging setup for the server process.

Application events go through logfire; this only shapes what uvicorn,
SQLAlchemy and asyncpg print through the standard ``logging`` module.
"""

import logging
import sys

from blog.config import Settings

_NOISY_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "asyncpg")


def _level_for(settings: Settings) -> int:
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "test":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure the root logger for the current environment.

    Args:
        settings: Application settings
    """
    level = _level_for(settings)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    # Request lines are already recorded as FastAPI spans
    if settings.is_production:
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logging.getLogger("blog").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
