"""Structured log lines for inbound requests, completions and errors."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

DEFAULT_SLOW_REQUEST_THRESHOLD = 2.0


class RequestLogger:
    """Emits one JSON log line per request event.

    The stdlib logging machinery reports handler failures on stderr instead of
    raising, so none of these calls can interrupt request handling.
    """

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        slow_request_threshold: float = DEFAULT_SLOW_REQUEST_THRESHOLD,
    ) -> None:
        self.logger = logger or logging.getLogger("todo_service.requests")
        self.slow_request_threshold = slow_request_threshold

    def log_request_start(self, method: str, url: str, body: Any = None) -> None:
        self.logger.info(
            f"Incoming request: {method} {url}",
            extra={"context": {"method": method, "url": url, "body": body}},
        )

    def log_request_end(self, method: str, url: str, duration_seconds: float, status_code: Optional[int] = None) -> None:
        context: Dict[str, Any] = {
            "method": method,
            "url": url,
            "duration_seconds": round(duration_seconds, 6),
        }
        if status_code is not None:
            context["status_code"] = status_code
        self.logger.info(f"Response time: {duration_seconds:.3f}s", extra={"context": context})

        if duration_seconds > self.slow_request_threshold:
            self.log_warning(f"Slow response: {duration_seconds:.3f}s for {method} {url}")

    def log_warning(self, message: str) -> None:
        self.logger.warning(message)

    def log_error(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.logger.error(message, extra={"context": {"details": details or {}}})
