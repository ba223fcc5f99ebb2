"""
Global test configuration for the todo service.
"""
import os

import pytest
from fastapi.testclient import TestClient

# Environment variables BEFORE any project import
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("TODO_STORE_BACKEND", "memory")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_LEVEL", "INFO")

from config_service.config import GlobalSettings  # noqa: E402
from core.metrics_collector import MetricsCollector  # noqa: E402
from todo_service.main import create_app  # noqa: E402
from todo_service.storage import InMemoryTodoStore, SqlTodoStore, SEED_TODOS  # noqa: E402


def make_settings(**overrides) -> GlobalSettings:
    values = {"ENVIRONMENT": "test", "TODO_STORE_BACKEND": "memory", "DATABASE_URL": "sqlite://"}
    values.update(overrides)
    return GlobalSettings(_env_file=None, **values)


@pytest.fixture
def memory_store():
    store = InMemoryTodoStore()
    store.seed(SEED_TODOS)
    return store


@pytest.fixture
def sql_store():
    store = SqlTodoStore("sqlite://")
    store.seed(SEED_TODOS)
    yield store
    store.close()


@pytest.fixture(params=["memory", "sql"])
def store(request):
    """Each test using this fixture runs once per store backend."""
    return request.getfixturevalue(f"{request.param}_store")


@pytest.fixture
def metrics():
    return MetricsCollector()


@pytest.fixture
def app(store, metrics):
    return create_app(settings=make_settings(TODO_STORE_BACKEND=store.backend), store=store, metrics=metrics)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
