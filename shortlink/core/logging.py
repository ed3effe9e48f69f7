"""
Core logging module.

This module configures the application logging with Loguru.
"""

import logging
import os
import sys

from loguru import logger

from shortlink.core.config import Settings

REQUEST_LEVEL = "REQUEST"


class InterceptHandler(logging.Handler):
    """
    Intercept standard logging and redirect to loguru.

    This handler intercepts all standard library logging calls
    and redirects them to loguru's more powerful logging system.
    """

    def emit(self, record: logging.LogRecord) -> None:
        # Try to get corresponding Loguru level or use level number
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where the logged message originated
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def _register_request_level() -> None:
    try:
        logger.level(REQUEST_LEVEL)
    except ValueError:
        logger.level(REQUEST_LEVEL, no=25, color="<green>")


def setup_logging(settings: Settings):
    """
    Configure application logging using Loguru.

    Sets up a stderr sink, an optional rotating file sink and the visit
    event sink, and intercepts standard library logging. Safe to call
    more than once; every call replaces the previous sinks.
    """
    level = settings.LOG_LEVEL.upper()

    # Remove default handlers
    logger.remove()

    logger.add(
        sys.stderr,
        level=level,
        format=settings.LOG_FORMAT,
        backtrace=settings.DEBUG,
        diagnose=settings.DEBUG,
    )

    if settings.LOG_DIR:
        os.makedirs(settings.LOG_DIR, exist_ok=True)
        log_file_path = os.path.join(settings.LOG_DIR, settings.LOG_FILENAME)

        if settings.LOG_JSON:
            logger.add(
                log_file_path,
                level=level,
                serialize=True,
                rotation=settings.LOG_ROTATION,
                retention=settings.LOG_RETENTION,
                compression="gz",
            )
        else:
            logger.add(
                log_file_path,
                level=level,
                format=settings.LOG_FORMAT,
                rotation=settings.LOG_ROTATION,
                retention=settings.LOG_RETENTION,
                compression="gz",
            )

        if settings.VISIT_LOG_ENABLED:
            logger.add(
                os.path.join(settings.LOG_DIR, "visits.log"),
                format="{time:YYYY-MM-DD HH:mm:ss.SSS} | IP:{extra[ip]} | Name:{extra[name]} | {message}",
                rotation=settings.LOG_ROTATION,
                retention=settings.LOG_RETENTION,
                enqueue=True,
                level="INFO",
                filter=lambda record: record["extra"].get("event_type") == "visit",
            )

    # Register custom log level for request logs
    _register_request_level()

    # Intercept standard library logging
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    for log_name in ["uvicorn", "uvicorn.access", "uvicorn.error", "fastapi"]:
        logging_logger = logging.getLogger(log_name)
        logging_logger.handlers = [InterceptHandler()]
        logging_logger.propagate = False

    return logger
