from fastapi import APIRouter, Body, Depends, Response, status
from fastapi.responses import PlainTextResponse
from typing import List, Optional
import logging
import re

from core.metrics_collector import MetricsCollector
from todo_service.api.dependencies import get_metrics_collector, get_store
from todo_service.core.exceptions import NotFoundError
from todo_service.core.validator import validate_upsert
from todo_service.schemas.todo import ErrorResponse, Todo, TodoUpsertRequest
from todo_service.storage.base import TodoStore

logger = logging.getLogger(__name__)
router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Todo text missing or empty"},
    500: {"model": ErrorResponse, "description": "Backing store fault"},
}
NOT_FOUND_RESPONSE = {404: {"model": ErrorResponse, "description": "Todo not found"}}

TODO_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
# ids are stored as signed 64-bit integers
MIN_TODO_ID, MAX_TODO_ID = -(2 ** 63), 2 ** 63 - 1


def parse_todo_id(raw_id: str) -> Optional[int]:
    """Parse a path id; anything but a plain ASCII integer in the 64-bit range matches no todo."""
    if not TODO_ID_PATTERN.fullmatch(raw_id):
        return None
    todo_id = int(raw_id)
    if not MIN_TODO_ID <= todo_id <= MAX_TODO_ID:
        return None
    return todo_id


@router.get("/", response_class=PlainTextResponse)
async def hello() -> str:
    logger.info("Hello World route called")
    return "Hello World"


@router.get("/todos", response_model=List[Todo])
def list_todos(store: TodoStore = Depends(get_store)) -> List[Todo]:
    return store.list()


@router.post(
    "/todos",
    response_model=Todo,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
def create_todo(
    payload: Optional[TodoUpsertRequest] = Body(default=None),
    store: TodoStore = Depends(get_store),
) -> Todo:
    fields = validate_upsert(payload)
    return store.create(fields.text, fields.is_complete)


@router.put(
    "/todos/{todo_id}",
    response_class=PlainTextResponse,
    responses={**ERROR_RESPONSES, **NOT_FOUND_RESPONSE},
)
def update_todo(
    todo_id: str,
    payload: Optional[TodoUpsertRequest] = Body(default=None),
    store: TodoStore = Depends(get_store),
) -> str:
    fields = validate_upsert(payload)
    parsed_id = parse_todo_id(todo_id)
    if parsed_id is None or not store.update(parsed_id, fields.text, fields.is_complete):
        raise NotFoundError(todo_id)
    return "Todo updated"


@router.delete(
    "/todos/{todo_id}",
    response_class=PlainTextResponse,
    responses={500: ERROR_RESPONSES[500], **NOT_FOUND_RESPONSE},
)
def delete_todo(todo_id: str, store: TodoStore = Depends(get_store)) -> str:
    parsed_id = parse_todo_id(todo_id)
    if parsed_id is None or not store.delete(parsed_id):
        raise NotFoundError(todo_id)
    return "Todo deleted"


@router.get("/metrics")
async def metrics(collector: MetricsCollector = Depends(get_metrics_collector)) -> Response:
    return Response(content=collector.snapshot(), media_type=collector.content_type)
