"""Shared fixtures.

The settings module requires ``DATABASE_URL`` at import time, so a
throwaway SQLite file is configured before anything from the package is
imported.
"""

import os
import tempfile
from pathlib import Path

_DB_DIR = tempfile.mkdtemp(prefix="traininglog-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{Path(_DB_DIR) / 'traininglog.db'}"
os.environ["TIMEZONE"] = "America/Vancouver"
os.environ["DEBUG"] = "false"

import pytest
from sqlmodel import Session, SQLModel

from traininglog.db.init_db import migrate
from traininglog.db.session import engine


@pytest.fixture
def db_engine():
    SQLModel.metadata.drop_all(engine)
    migrate(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def db_session(db_engine):
    with Session(db_engine) as session:
        yield session


@pytest.fixture
def client(db_engine):
    from fastapi.testclient import TestClient

    from traininglog.main import app

    with TestClient(app) as test_client:
        yield test_client
