"""Translation of service errors into ``{"error": message}`` responses."""
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from todo_service.api.dependencies import get_request_logger
from todo_service.core.exceptions import TodoServiceError

INVALID_BODY_MESSAGE = "Invalid request body"


async def handle_todo_service_error(request: Request, exc: TodoServiceError) -> JSONResponse:
    get_request_logger(request).log_error(
        f"{request.method} {request.url.path} failed: {exc.message}",
        {"status_code": exc.status_code, **exc.details},
    )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    get_request_logger(request).log_error(
        f"{request.method} {request.url.path} failed: {INVALID_BODY_MESSAGE}",
        {"status_code": status.HTTP_400_BAD_REQUEST, "errors": exc.errors()},
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": INVALID_BODY_MESSAGE})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TodoServiceError, handle_todo_service_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
