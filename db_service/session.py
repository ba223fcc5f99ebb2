from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool
from contextlib import contextmanager
from typing import Iterator


def _is_sqlite_memory(database_url: str) -> bool:
    return database_url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in database_url


def build_engine(database_url: str = "sqlite://") -> Engine:
    """Create the engine for ``database_url``.

    An in-memory SQLite database only lives as long as its connection, so it
    is pinned to a single connection shared by every thread.
    """
    if database_url.startswith("postgres://"):
        database_url = database_url.replace("postgres://", "postgresql://", 1)

    if _is_sqlite_memory(database_url):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    if database_url.startswith("sqlite"):
        return create_engine(database_url, connect_args={"check_same_thread": False})

    return create_engine(
        database_url,
        pool_pre_ping=True,
        pool_size=20,
        max_overflow=30,
        pool_recycle=3600  # Recycler les connexions après 1h
    )


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


# Helper contextmanager pour une unité de travail hors endpoints FastAPI
@contextmanager
def get_db_context(session_factory: sessionmaker) -> Iterator[Session]:
    db = session_factory()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
