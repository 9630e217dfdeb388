"""Standard-library logging routed into Logfire.

uvicorn, SQLAlchemy and alembic log through ``logging``; forwarding those
records keeps them next to the service spans.
"""

import logging

import logfire

from inkwell.config import Settings

# Library loggers kept quiet unless debugging
NOISY_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "asyncpg")


def setup_logging(settings: Settings) -> None:
    """Send stdlib log records to Logfire at a level set by ``debug``.

    Call after ``configure_logfire``.
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(level if settings.debug else logging.WARNING)

    logging.getLogger("inkwell").setLevel(level)
    logfire.info(
        "Logging configured",
        environment=settings.environment,
        level=logging.getLevelName(level),
    )
