from __future__ import annotations

import logging
from threading import Lock
from typing import Dict, List

from todo_service.schemas.todo import Todo
from todo_service.storage.base import TodoStore

logger = logging.getLogger(__name__)


class InMemoryTodoStore(TodoStore):
    """Volatile store keeping todos in insertion order for the process lifetime."""

    backend = "memory"

    def __init__(self, start_id: int = 1) -> None:
        self._lock = Lock()
        # dicts keep insertion order, which is the listing order
        self._todos: Dict[int, Todo] = {}
        self._next_id = start_id

    def list(self) -> List[Todo]:
        with self._lock:
            todos = [todo.model_copy() for todo in self._todos.values()]
        logger.info("Todos retrieved", extra={"context": {"count": len(todos)}})
        return todos

    def create(self, text: str, is_complete: bool = False) -> Todo:
        with self._lock:
            todo = Todo(id=self._next_id, text=text, isComplete=is_complete)
            self._todos[todo.id] = todo
            self._next_id += 1
        logger.info("Todo created", extra={"context": {"todo_id": todo.id, "text": text}})
        return todo.model_copy()

    def update(self, todo_id: int, text: str, is_complete: bool) -> bool:
        with self._lock:
            if todo_id not in self._todos:
                found = False
            else:
                self._todos[todo_id] = Todo(id=todo_id, text=text, isComplete=is_complete)
                found = True
        if found:
            logger.info(
                f"Todo {todo_id} updated",
                extra={"context": {"text": text, "isComplete": is_complete}},
            )
        else:
            logger.warning(f"Todo {todo_id} not found")
        return found

    def delete(self, todo_id: int) -> bool:
        with self._lock:
            removed = self._todos.pop(todo_id, None) is not None
        if removed:
            logger.info(f"Todo {todo_id} deleted")
        else:
            logger.warning(f"Todo {todo_id} not found")
        return removed
