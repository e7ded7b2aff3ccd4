"""Database connection and session management.

The ``Database`` object owns the engine and session factory. It is built once
by the application factory (or a CLI script) and handed to request handlers
through ``get_db``; nothing here is created at import time.
"""

from collections.abc import Generator
from typing import Any

from fastapi import Request
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.models.base import Base

_IN_MEMORY_SQLITE_URLS = ("sqlite://", "sqlite:///:memory:", "sqlite+pysqlite://")


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Engine plus session factory for one database URL."""

    def __init__(self, url: str, echo: bool = False) -> None:
        self.url = url
        engine_kwargs: dict[str, Any] = {"echo": echo, "pool_pre_ping": True}
        is_sqlite = url.startswith("sqlite")
        if is_sqlite:
            # Sessions are used from the threadpool FastAPI runs sync routes in.
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if url in _IN_MEMORY_SQLITE_URLS:
                engine_kwargs["poolclass"] = StaticPool
        self.engine: Engine = create_engine(url, **engine_kwargs)
        if is_sqlite:
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)
        self.session_factory = sessionmaker(
            autocommit=False, autoflush=False, bind=self.engine
        )

    def session(self) -> Session:
        """Open a new session; the caller is responsible for closing it."""
        return self.session_factory()

    def create_all(self) -> None:
        """Create any missing tables for the registered models."""
        Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request) -> Generator[Session, None, None]:
    """Dependency that yields a DB session and closes it when done."""
    database: Database = request.app.state.database
    db = database.session()
    try:
        yield db
    finally:
        db.close()


def check_db_connected(db: Session) -> bool:
    """Run a trivial query to verify the database is reachable."""
    try:
        db.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError:
        return False
