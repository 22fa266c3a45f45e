"""
Database initialization.

Creates missing tables, backfills columns added after the first release
and creates missing indexes.  Every step is additive, so this runs on each
startup.
"""

import logging

from sqlalchemy import Engine, inspect
from sqlalchemy.types import Date, Numeric, TypeEngine
from sqlmodel import SQLModel, text

import traininglog.db.base  # noqa: F401
from traininglog.models.workout import Workout
from traininglog.models.workout_item import WorkoutItem

logger = logging.getLogger(__name__)

# Columns that older installs may be missing: table -> [(name, type)]
_BACKFILL_COLUMNS: dict[str, list[tuple[str, TypeEngine]]] = {
    "workouts": [
        ("session_date", Date()),
        ("body_weight_kg", Numeric(6, 2)),
    ],
}


def migrate(engine: Engine) -> None:
    """
    Bring the schema up to date.

    - Creates all SQLModel tables (with their indexes) that do not exist
    - Adds backfill columns to existing tables
    - Creates indexes missing on existing tables
    """
    logger.info("Creating database tables...")
    SQLModel.metadata.create_all(engine)

    inspector = inspect(engine)
    with engine.begin() as conn:
        for table_name, columns in _BACKFILL_COLUMNS.items():
            existing = {column["name"] for column in inspector.get_columns(table_name)}
            for name, type_ in columns:
                if name in existing:
                    continue
                ddl = type_.compile(dialect=engine.dialect)
                conn.execute(text(f"ALTER TABLE {table_name} ADD COLUMN {name} {ddl}"))
                logger.info("Added column %s.%s", table_name, name)

        for table in (Workout.__table__, WorkoutItem.__table__):
            for index in table.indexes:
                index.create(conn, checkfirst=True)

    logger.info("Database schema is up to date")
