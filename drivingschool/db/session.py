"""
Database session management.

Provides the SQLModel engine, the FastAPI session dependency and the
transaction scope used by every mutating service operation.
"""

from contextlib import contextmanager
from typing import Generator, Iterator

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine

from drivingschool.core.config import settings


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(url: str, echo: bool = False, **kwargs) -> Engine:
    """Create an engine for ``url``.

    SQLite connections get ``PRAGMA foreign_keys=ON`` so that the
    enrollment ``ON DELETE CASCADE`` behaves as on PostgreSQL.
    """
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
        db_engine = create_engine(url, echo=echo, **kwargs)
        event.listen(db_engine, "connect", _enable_sqlite_foreign_keys)
        return db_engine

    kwargs.setdefault("pool_pre_ping", True)  # Verify connections before using
    kwargs.setdefault("pool_size", 5)
    kwargs.setdefault("max_overflow", 10)
    return create_engine(url, echo=echo, **kwargs)


# Create database engine
DATABASE_URL: str = settings.DATABASE_URL

engine = create_db_engine(DATABASE_URL, echo=settings.DEBUG)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for FastAPI endpoints to get database session.

    Yields:
        SQLModel Session instance
    """
    with Session(engine) as session:
        yield session


@contextmanager
def transaction(session: Session) -> Iterator[Session]:
    """Commit everything done inside the block, or roll it all back.

    Repositories only ``flush``; this is the single commit point of a
    service operation.

    Example:
        with transaction(db):
            repo.create(entry)
            other_repo.add(...)
    """
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
