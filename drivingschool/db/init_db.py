"""
Database initialization.

Creates all tables registered on ``SQLModel.metadata``.
"""

import logging
from typing import Optional

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

import drivingschool.db.base  # noqa: F401

logger = logging.getLogger(__name__)


def init_db(db_engine: Optional[Engine] = None) -> None:
    """Create every table that does not exist yet."""
    if db_engine is None:
        from drivingschool.db.session import engine as db_engine

    logger.info("Creating database tables on %s", db_engine.url.render_as_string(hide_password=True))
    SQLModel.metadata.create_all(db_engine)
    logger.info("Tables created: %s", ", ".join(sorted(SQLModel.metadata.tables)))


if __name__ == "__main__":
    init_db()
