"""
Logging configuration for the scoring engine.

Scorers emit structlog events (``logger.info("aim_scored", aim_id=..., ...)``);
the pipeline uses stdlib ``logging``. Both end up on the same root handler.
"""
import logging
import sys
from typing import Optional

import structlog

from tradegrade.config import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure stdlib logging and structlog from settings (LOG_LEVEL, LOG_FORMAT)."""
    settings = settings or get_settings()
    level = getattr(logging, settings.LOG_LEVEL)

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    if settings.LOG_FORMAT == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )

    logging.getLogger(__name__).info(
        f"{settings.APP_NAME} v{settings.APP_VERSION} ({settings.APP_ENV}): "
        f"logging at {settings.LOG_LEVEL}, scoring parameters {settings.SCORING_PARAM_VERSION}"
    )
