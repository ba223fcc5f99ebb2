"""Structured logging helpers used across services."""
from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JsonFormatter(logging.Formatter):
    """Formatter that outputs logs as JSON strings."""

    def __init__(self, datefmt: str = DATE_FORMAT) -> None:
        super().__init__(datefmt=datefmt)

    def format(self, record: logging.LogRecord) -> str:
        log_record: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        context = getattr(record, "context", None)
        if isinstance(context, dict):
            log_record.update(context)
        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)
        # default=str keeps non-JSON values (bytes bodies, datetimes) loggable
        return json.dumps(log_record, ensure_ascii=False, default=str)


def get_logger(name: str, **context: Any) -> logging.Logger:
    """Return a logger with JSON output and optional bound context."""

    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JsonFormatter())
        logger.addHandler(handler)
    if context:
        class ContextAdapter(logging.LoggerAdapter):
            def process(self, msg, kwargs):
                extra = kwargs.setdefault("extra", {})
                merged = dict(context)
                merged.update(extra.get("context") or {})
                extra["context"] = merged
                return msg, kwargs
        return ContextAdapter(logger, {})
    return logger


def setup_logging(level: str = "INFO") -> None:
    """Configure global logging level and quiet chatty third-party loggers."""

    logging.getLogger().setLevel(getattr(logging, level.upper(), logging.INFO))
    for noisy in ("httpx", "httpcore", "sqlalchemy.engine"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


__all__ = ["get_logger", "setup_logging", "JsonFormatter"]
