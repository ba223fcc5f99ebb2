from todo_service.schemas.todo import ErrorResponse, Todo, TodoUpsertRequest

__all__ = ["Todo", "TodoUpsertRequest", "ErrorResponse"]
