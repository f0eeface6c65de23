"""Loguru setup for the storefront.

Every record carries the correlation id of the request that produced it
and passes through a redaction patcher, so credentials and session cookies
never reach a sink even when a caller formats them into a message.
"""

from __future__ import annotations

import logging
import os
import re
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import Any

from loguru import logger as _logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<lvl>{level:<8}</lvl> | "
    "<magenta>{extra[correlation_id]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<lvl>{message}</lvl>"
)

_NO_CORRELATION = "-"
_CORRELATION_ID: ContextVar[str] = ContextVar("correlation_id", default=_NO_CORRELATION)

_REDACTIONS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"(password\s*[:=]\s*['\"]?)[^'\"\s,}]+", re.IGNORECASE), r"\1***"),
    (re.compile(r"(auth-token\s*[:=]\s*['\"]?)[^'\"\s;,}]+", re.IGNORECASE), r"\1***"),
    (re.compile(r"(secret[_-]?key\s*[:=]\s*['\"]?)[^'\"\s,}]+", re.IGNORECASE), r"\1***"),
    # Fernet tokens always start with the version byte 0x80.
    (re.compile(r"gAAAAA[A-Za-z0-9_\-=]{20,}"), "<session-token>"),
)


def redact(message: str) -> str:
    for pattern, replacement in _REDACTIONS:
        message = pattern.sub(replacement, message)
    return message


def _patch_record(record: dict[str, Any]) -> None:
    record["message"] = redact(record["message"])
    record["extra"].setdefault("correlation_id", _CORRELATION_ID.get())


_logger.configure(extra={"correlation_id": _NO_CORRELATION}, patcher=_patch_record)


def default_log_file() -> Path:
    configured = os.getenv("LOG_FILE")
    if configured:
        return Path(configured)
    return Path(__file__).resolve().parents[2] / "instance" / "app.log"


class _InterceptHandler(logging.Handler):
    """Routes stdlib logging (werkzeug, httpx) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = _logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        _logger.opt(depth=6, exception=record.exc_info).bind(
            correlation_id=_CORRELATION_ID.get()
        ).log(level, record.getMessage())


class ContextualLogger:
    """Loguru proxy bound to the current request's correlation id."""

    def __getattr__(self, name: str) -> Any:
        return getattr(_logger.bind(correlation_id=_CORRELATION_ID.get()), name)


def set_correlation_id(value: str | None) -> None:
    _CORRELATION_ID.set(value or _NO_CORRELATION)


def get_correlation_id() -> str:
    return _CORRELATION_ID.get()


def clear_correlation_id() -> None:
    _CORRELATION_ID.set(_NO_CORRELATION)


def setup_logging(
    level: str | None = None,
    *,
    debug_mode: bool = False,
    log_file: str | Path | None = None,
) -> Path:
    """(Re)configure the console and file sinks and return the log file path."""

    resolved_level = "DEBUG" if debug_mode else (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    path = Path(log_file) if log_file else default_log_file()
    path.parent.mkdir(parents=True, exist_ok=True)

    _logger.remove()
    _logger.add(sys.stderr, level=resolved_level, format=LOG_FORMAT, colorize=True, diagnose=False)
    _logger.add(
        path,
        level=resolved_level,
        format=LOG_FORMAT,
        colorize=False,
        diagnose=False,
        backtrace=debug_mode,
        enqueue=True,
        rotation="10 MB",
        retention=5,
        encoding="utf-8",
    )

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    return path


logger = ContextualLogger()

__all__ = [
    "LOG_FORMAT",
    "ContextualLogger",
    "clear_correlation_id",
    "default_log_file",
    "get_correlation_id",
    "logger",
    "redact",
    "set_correlation_id",
    "setup_logging",
]
