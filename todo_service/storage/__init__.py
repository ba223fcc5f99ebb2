"""Store backends and the factory selecting one from configuration."""
from __future__ import annotations

from config_service.config import GlobalSettings
from todo_service.storage.base import SEED_TODOS, TodoStore
from todo_service.storage.memory import InMemoryTodoStore
from todo_service.storage.sql import SqlTodoStore


def build_store(settings: GlobalSettings) -> TodoStore:
    """Instantiate the backend named by ``TODO_STORE_BACKEND`` and seed it if configured and empty."""
    if settings.TODO_STORE_BACKEND == "sql":
        store: TodoStore = SqlTodoStore(settings.DATABASE_URL)
    else:
        store = InMemoryTodoStore()
    # a persistent database keeps the rows seeded on a previous start
    if settings.SEED_DATA and not store.list():
        store.seed(SEED_TODOS)
    return store


__all__ = ["TodoStore", "InMemoryTodoStore", "SqlTodoStore", "build_store", "SEED_TODOS"]
