"""Tests for the startup migration against an install that predates the metadata columns."""

import pytest
from sqlalchemy import inspect, text

from traininglog.db.init_db import migrate
from traininglog.db.session import build_engine


@pytest.fixture
def legacy_engine(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'legacy.db'}")
    with engine.begin() as conn:
        conn.execute(text("CREATE TABLE workouts (id INTEGER PRIMARY KEY, day_num INTEGER NOT NULL, "
                          "created_at DATETIME, completed_at DATETIME)"))
        conn.execute(text("INSERT INTO workouts (day_num, completed_at) VALUES (3, '2024-03-01 18:00:00')"))
    yield engine
    engine.dispose()


class TestMigrate:

    def test_backfills_columns_and_indexes(self, legacy_engine):
        migrate(legacy_engine)

        inspector = inspect(legacy_engine)
        columns = {column["name"] for column in inspector.get_columns("workouts")}
        assert {"session_date", "body_weight_kg"} <= columns
        assert "ix_workouts_session_date" in {index["name"] for index in inspector.get_indexes("workouts")}
        assert "workout_items" in inspector.get_table_names()

    def test_safe_to_run_again(self, legacy_engine):
        migrate(legacy_engine)
        migrate(legacy_engine)

        inspector = inspect(legacy_engine)
        columns = [column["name"] for column in inspector.get_columns("workouts")]
        assert columns.count("session_date") == 1
        assert columns.count("body_weight_kg") == 1
        assert "ix_workouts_session_date" in {index["name"] for index in inspector.get_indexes("workouts")}
        with legacy_engine.connect() as conn:
            assert conn.execute(text("SELECT day_num FROM workouts")).scalars().all() == [3]
