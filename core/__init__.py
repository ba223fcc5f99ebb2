"""Core utilities shared across the project."""

from .logging import get_logger, setup_logging, JsonFormatter
from .metrics_collector import MetricsCollector
from .validators import required_text, as_flag

__all__ = [
    "get_logger",
    "setup_logging",
    "JsonFormatter",
    "MetricsCollector",
    "required_text",
    "as_flag",
]
