from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, List, Tuple

from todo_service.schemas.todo import Todo

SEED_TODOS = ("Python auffrischen", "JavaScript üben", "React lernen")


class TodoStore(ABC):
    """Persistence contract shared by every store backend.

    Implementations own their collection exclusively and return copies, so
    callers never hold a reference into the store between requests. Backing
    store faults are raised as ``InternalError``.
    """

    backend: str = ""

    @abstractmethod
    def list(self) -> List[Todo]:
        """Return all todos in a stable order."""

    @abstractmethod
    def create(self, text: str, is_complete: bool = False) -> Todo:
        """Persist a new todo under the next unused id and return it."""

    @abstractmethod
    def update(self, todo_id: int, text: str, is_complete: bool) -> bool:
        """Overwrite text and completion flag; False when no todo has ``todo_id``."""

    @abstractmethod
    def delete(self, todo_id: int) -> bool:
        """Remove a todo; False when no todo has ``todo_id``."""

    def seed(self, texts: Iterable[str] = SEED_TODOS) -> List[Todo]:
        return [self.create(text, False) for text in texts]

    def health(self) -> Tuple[bool, str]:
        return True, "Store available"

    def close(self) -> None:
        pass
