"""Errors raised by the todo service and the HTTP status each one maps to."""
from __future__ import annotations

from typing import Any, Dict, Optional


class TodoServiceError(Exception):
    """Base error; ``message`` is safe to show to clients."""

    status_code = 500

    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(TodoServiceError):
    status_code = 400


class NotFoundError(TodoServiceError):
    status_code = 404

    def __init__(self, todo_id: Any) -> None:
        super().__init__("Todo not found", details={"todo_id": todo_id})
        self.todo_id = todo_id


class InternalError(TodoServiceError):
    """Backing-store fault. Store specifics stay in ``details`` and never reach the client."""

    status_code = 500

    def __init__(self, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("Internal Server Error", details=details)


__all__ = ["TodoServiceError", "ValidationError", "NotFoundError", "InternalError"]
