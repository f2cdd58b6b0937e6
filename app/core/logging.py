"""
Logging configuration using Loguru.

Every record carries the request id bound by the HTTP middleware, so one
transcript request can be followed from validation through both provider
calls.
"""
import logging
import sys
from typing import Any, Optional

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<magenta>{extra[request_id]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | "
    "{extra[request_id]} | {name}:{function}:{line} - {message}"
)

# Loggers that install their own handlers and must be rerouted explicitly
SERVER_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error", "fastapi")


class InterceptHandler(logging.Handler):
    """Forwards standard library log records (uvicorn, urllib3, requests) to Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Walk past logging's own frames so Loguru reports the real caller
        frame = logging.currentframe()
        depth = 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def _default_request_id(record: dict[str, Any]) -> None:
    # Records logged outside a request (startup, shutdown) have no bound id
    record["extra"].setdefault("request_id", "N/A")


def _route_stdlib_logging() -> None:
    logging.root.handlers = [InterceptHandler()]
    logging.root.setLevel(logging.NOTSET)

    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers = [InterceptHandler()]
        server_logger.propagate = False


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure Loguru as the single logging backend.

    Args:
        level: Minimum level for all sinks.
        log_file: Path of a rotating, zip-compressed log file, or None to log
            to stderr only.
    """
    _route_stdlib_logging()

    logger.remove()
    logger.configure(patcher=_default_request_id)

    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level)

    if log_file:
        logger.add(
            log_file,
            rotation="10 MB",
            retention="30 days",
            compression="zip",
            enqueue=True,
            level=level,
            format=FILE_FORMAT,
        )
