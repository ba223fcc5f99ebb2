from __future__ import annotations

import logging
from threading import Lock
from typing import List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from db_service.base import Base
from db_service.health import check_database_health
from db_service.models.todo import TodoItem
from db_service.session import build_engine, build_session_factory, get_db_context
from todo_service.core.exceptions import InternalError
from todo_service.schemas.todo import Todo
from todo_service.storage.base import TodoStore

logger = logging.getLogger(__name__)


def _to_todo(item: TodoItem) -> Todo:
    return Todo(id=item.id, text=item.text, isComplete=bool(item.is_complete))


class SqlTodoStore(TodoStore):
    """Relational store over the ``todos`` table; ids come from the auto-increment key."""

    backend = "sql"

    def __init__(self, database_url: str = "sqlite://", engine: Optional[Engine] = None) -> None:
        self.engine = engine if engine is not None else build_engine(database_url)
        self._session_factory = build_session_factory(self.engine)
        # SQLite in-memory databases share a single connection between threads
        self._lock = Lock()
        try:
            Base.metadata.create_all(bind=self.engine, tables=[TodoItem.__table__])
        except SQLAlchemyError as e:
            logger.error("Failed to create table todos", extra={"context": {"error": str(e)}})
            raise InternalError({"operation": "create_table", "error": str(e)}) from e
        logger.info("Table todos ready")

    def _fault(self, operation: str, error: SQLAlchemyError, **context) -> InternalError:
        details = {"operation": operation, "error": str(error), **context}
        logger.error(f"Todo store operation '{operation}' failed", extra={"context": details})
        return InternalError(details)

    def list(self) -> List[Todo]:
        try:
            with self._lock, get_db_context(self._session_factory) as db:
                items = db.execute(select(TodoItem).order_by(TodoItem.id)).scalars().all()
                todos = [_to_todo(item) for item in items]
        except SQLAlchemyError as e:
            raise self._fault("list", e) from e
        logger.info("Todos retrieved", extra={"context": {"count": len(todos)}})
        return todos

    def create(self, text: str, is_complete: bool = False) -> Todo:
        try:
            with self._lock, get_db_context(self._session_factory) as db:
                item = TodoItem(text=text, is_complete=is_complete)
                db.add(item)
                db.flush()
                todo = _to_todo(item)
        except SQLAlchemyError as e:
            raise self._fault("create", e, text=text) from e
        logger.info("Todo created", extra={"context": {"todo_id": todo.id, "text": text}})
        return todo

    def update(self, todo_id: int, text: str, is_complete: bool) -> bool:
        try:
            with self._lock, get_db_context(self._session_factory) as db:
                item = db.get(TodoItem, todo_id)
                if item is not None:
                    item.text = text
                    item.is_complete = is_complete
                found = item is not None
        except SQLAlchemyError as e:
            raise self._fault("update", e, todo_id=todo_id) from e
        if found:
            logger.info(
                f"Todo {todo_id} updated",
                extra={"context": {"text": text, "isComplete": is_complete}},
            )
        else:
            logger.warning(f"Todo {todo_id} not found")
        return found

    def delete(self, todo_id: int) -> bool:
        try:
            with self._lock, get_db_context(self._session_factory) as db:
                item = db.get(TodoItem, todo_id)
                if item is not None:
                    db.delete(item)
                removed = item is not None
        except SQLAlchemyError as e:
            raise self._fault("delete", e, todo_id=todo_id) from e
        if removed:
            logger.info(f"Todo {todo_id} deleted")
        else:
            logger.warning(f"Todo {todo_id} not found")
        return removed

    def health(self) -> Tuple[bool, str]:
        return check_database_health(self.engine)

    def close(self) -> None:
        logger.info("Closing database connection")
        self.engine.dispose()
