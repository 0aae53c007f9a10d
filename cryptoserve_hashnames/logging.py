"""Structured logging for hash name resolution.

Provides:
- JSON structured output for log aggregation
- Human-readable output for development
- Keyword fields on log calls

Usage:
    from cryptoserve_hashnames.logging import get_logger

    logger = get_logger(__name__)
    logger.debug("Hash name lookup failed", algorithm="md5")
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from cryptoserve_hashnames.config import get_settings


class StructuredFormatter(logging.Formatter):
    """JSON structured log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if hasattr(record, "extra_fields"):
            log_entry.update(record.extra_fields)

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


class HumanFormatter(logging.Formatter):
    """Human-readable log formatter for development."""

    COLORS = {
        "DEBUG": "\033[36m",    # Cyan
        "INFO": "\033[32m",     # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",    # Red
        "CRITICAL": "\033[35m", # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")

        extra_str = ""
        if hasattr(record, "extra_fields") and record.extra_fields:
            extra_str = " | " + " ".join(
                f"{k}={v}" for k, v in record.extra_fields.items()
            )

        timestamp = datetime.now().strftime("%H:%M:%S.%f")[:-3]
        level = record.levelname[:4]

        message = (
            f"{color}{timestamp} {level}{self.RESET} "
            f"[{record.name}] {record.getMessage()}{extra_str}"
        )

        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)

        return message


class StructuredLogger(logging.Logger):
    """Logger with structured logging support."""

    def _log_with_extra(
        self,
        level: int,
        msg: str,
        args: tuple,
        exc_info: Any = None,
        **kwargs,
    ):
        extra = {"extra_fields": kwargs} if kwargs else {}
        super()._log(level, msg, args, exc_info=exc_info, extra=extra)

    def debug(self, msg: str, *args, **kwargs):
        if self.isEnabledFor(logging.DEBUG):
            self._log_with_extra(logging.DEBUG, msg, args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        if self.isEnabledFor(logging.INFO):
            self._log_with_extra(logging.INFO, msg, args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        if self.isEnabledFor(logging.WARNING):
            self._log_with_extra(logging.WARNING, msg, args, **kwargs)

    def error(self, msg: str, *args, exc_info: Any = None, **kwargs):
        if self.isEnabledFor(logging.ERROR):
            self._log_with_extra(logging.ERROR, msg, args, exc_info=exc_info, **kwargs)


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger for a module."""
    logging.setLoggerClass(StructuredLogger)
    logger = logging.getLogger(name)
    logging.setLoggerClass(logging.Logger)
    return logger


def setup_logging(json_output: bool = False, level: str = "INFO"):
    """Configure logging for the package's loggers.

    Only the ``cryptoserve_hashnames`` logger tree is touched; the root
    logger belongs to the host application.

    Args:
        json_output: Use JSON format (for production)
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    package_logger = logging.getLogger("cryptoserve_hashnames")
    package_logger.setLevel(getattr(logging, level.upper()))

    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)

    if json_output:
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(HumanFormatter())

    package_logger.addHandler(handler)
    package_logger.propagate = False


def configure_from_settings():
    """Apply logging options from HASHNAMES_* settings."""
    settings = get_settings()
    setup_logging(json_output=settings.log_json, level=settings.log_level)
