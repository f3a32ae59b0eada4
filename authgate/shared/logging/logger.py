"""Loguru setup for authgate.

Every record passes through ``sanitize_record`` before any sink sees it, so
passwords, digests and session ids never reach the console or the log file.
"""

from __future__ import annotations

import logging
import os
import sys
from contextvars import ContextVar
from typing import Any

from loguru import logger as _logger

from .sensitive_filter import sanitize_record

_FMT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<lvl>{level:<8}</lvl> | "
    "<magenta>{extra[correlation_id]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<lvl>{message}</lvl>"
)

_CORRELATION_ID: ContextVar[str] = ContextVar("correlation_id", default="-")

_QUIET_LOGGERS = {
    "werkzeug": logging.INFO,
    "sqlalchemy.engine": logging.WARNING,
}


def _log_file_path() -> str:
    configured = os.getenv("LOG_FILE")
    if configured:
        return configured
    instance_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), "../../instance"))
    return os.path.join(instance_dir, "app.log")


class _InterceptHandler(logging.Handler):
    """Route stdlib records (werkzeug, SQLAlchemy) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = _logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        _logger.opt(depth=6, exception=record.exc_info).bind(
            correlation_id=_CORRELATION_ID.get()
        ).log(level, record.getMessage())


class ContextualLogger:
    """Loguru proxy that tags each call with the current request's correlation id."""

    def __getattr__(self, name: str) -> Any:
        return getattr(_logger.bind(correlation_id=_CORRELATION_ID.get()), name)


def set_correlation_id(value: str | None) -> None:
    _CORRELATION_ID.set(value or "-")


def clear_correlation_id() -> None:
    _CORRELATION_ID.set("-")


def setup_logging(level: str | None = None, *, debug_mode: bool = False) -> None:
    level = (level or os.getenv("LOG_LEVEL") or ("DEBUG" if debug_mode else "INFO")).upper()
    log_file = _log_file_path()
    os.makedirs(os.path.dirname(log_file), exist_ok=True)

    common: dict[str, Any] = {
        "level": level,
        "format": _FMT,
        "filter": sanitize_record,
        "backtrace": False,
        "diagnose": False,
    }

    _logger.remove()
    _logger.configure(extra={"correlation_id": "-"})
    _logger.add(sys.stderr, colorize=True, **common)
    _logger.add(log_file, colorize=False, enqueue=True, mode="a", encoding="utf-8", **common)

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
    for name, quiet_level in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(quiet_level)


logger = ContextualLogger()

__all__ = [
    "clear_correlation_id",
    "logger",
    "set_correlation_id",
    "setup_logging",
]
