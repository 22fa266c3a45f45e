"""
Database session management.

Provides the SQLModel engine, the per-request session dependency and a
reachability check.
"""

import logging
from typing import Generator

from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, create_engine, text

from traininglog.core.config import settings

logger = logging.getLogger(__name__)


def build_engine(url: str) -> Engine:
    """Create the engine with a small bounded pool.

    SQLite (used by the test suite) gets thread-sharing enabled instead of
    pool sizing.
    """
    kwargs = {
        "echo": settings.DEBUG,  # Log SQL queries in debug mode
        "pool_pre_ping": True,   # Verify connections before using
    }
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
    else:
        kwargs["pool_size"] = settings.DB_POOL_SIZE
        kwargs["max_overflow"] = 0
    return create_engine(url, **kwargs)


engine = build_engine(settings.DATABASE_URL)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for FastAPI endpoints to get database session.

    Yields:
        SQLModel Session instance
    """
    with Session(engine) as session:
        yield session


def ping(bind: Engine = engine) -> bool:
    """Return True when the database answers a trivial query."""
    try:
        with bind.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError as e:
        logger.warning("Database ping failed: %s", e)
        return False
