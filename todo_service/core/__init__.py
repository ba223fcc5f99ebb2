from todo_service.core.exceptions import InternalError, NotFoundError, TodoServiceError, ValidationError
from todo_service.core.request_logger import RequestLogger
from todo_service.core.validator import TodoFields, validate_upsert

__all__ = [
    "TodoServiceError",
    "ValidationError",
    "NotFoundError",
    "InternalError",
    "RequestLogger",
    "TodoFields",
    "validate_upsert",
]
