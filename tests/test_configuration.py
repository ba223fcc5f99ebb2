import pytest
from pydantic import ValidationError

from config_service.config import GlobalSettings
from todo_service.storage import InMemoryTodoStore, SqlTodoStore, build_store


def test_defaults_without_environment(monkeypatch):
    for name in ("TODO_STORE_BACKEND", "DATABASE_URL", "ENVIRONMENT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = GlobalSettings(_env_file=None)
    assert settings.TODO_STORE_BACKEND == "memory"
    assert settings.DATABASE_URL == "sqlite://"
    assert settings.PORT == 5000
    assert settings.SEED_DATA is True
    assert settings.SLOW_REQUEST_THRESHOLD_SECONDS == pytest.approx(2.0)


def test_store_backend_from_env(monkeypatch):
    monkeypatch.setenv("TODO_STORE_BACKEND", " SQL ")
    settings = GlobalSettings(_env_file=None)
    assert settings.TODO_STORE_BACKEND == "sql"


def test_unknown_store_backend_is_rejected(monkeypatch):
    monkeypatch.setenv("TODO_STORE_BACKEND", "redis")
    with pytest.raises(ValidationError):
        GlobalSettings(_env_file=None)


def test_postgres_scheme_is_normalized(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgres://user:pw@db:5432/todos")
    settings = GlobalSettings(_env_file=None)
    assert settings.DATABASE_URL == "postgresql://user:pw@db:5432/todos"


def test_cors_origins_are_split(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:5173, http://localhost:3000,")
    settings = GlobalSettings(_env_file=None)
    assert settings.get_cors_origins() == ["http://localhost:5173", "http://localhost:3000"]


def test_build_store_selects_backend_and_seeds():
    memory = build_store(GlobalSettings(_env_file=None, TODO_STORE_BACKEND="memory"))
    sql = build_store(GlobalSettings(_env_file=None, TODO_STORE_BACKEND="sql", DATABASE_URL="sqlite://"))
    try:
        assert isinstance(memory, InMemoryTodoStore)
        assert isinstance(sql, SqlTodoStore)
        assert [todo.id for todo in memory.list()] == [1, 2, 3]
        assert [todo.id for todo in sql.list()] == [1, 2, 3]
    finally:
        sql.close()


def test_build_store_without_seed_data():
    store = build_store(GlobalSettings(_env_file=None, SEED_DATA=False))
    assert store.list() == []


def test_persistent_database_is_seeded_once(tmp_path):
    settings = GlobalSettings(
        _env_file=None, TODO_STORE_BACKEND="sql", DATABASE_URL=f"sqlite:///{tmp_path / 'todos.db'}"
    )
    build_store(settings).close()
    store = build_store(settings)
    try:
        assert [todo.id for todo in store.list()] == [1, 2, 3]
    finally:
        store.close()
