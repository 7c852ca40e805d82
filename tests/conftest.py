"""
Shared test fixtures.

The API runs against an in-memory SQLite database that replaces the
MySQL engine for the duration of each test, so no external server is
needed.  ``broken_store`` swaps in an engine that cannot connect.
"""

from typing import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from usuarios_api.app.core import db
from usuarios_api.app.main import app

SCHEMA = """
CREATE TABLE usuarios (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    nombre TEXT NOT NULL,
    telefono TEXT,
    email TEXT NOT NULL
)
"""


@pytest.fixture
def engine() -> Iterator[Engine]:
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    with test_engine.begin() as conn:
        conn.execute(text(SCHEMA))
    db.set_engine(test_engine)
    yield test_engine
    db.set_engine(None)


@pytest.fixture
def client(engine: Engine) -> TestClient:
    return TestClient(app)


@pytest.fixture
def broken_store(tmp_path) -> Iterator[Engine]:
    missing = tmp_path / "missing" / "store.db"
    broken = create_engine(f"sqlite:///{missing}", future=True)
    db.set_engine(broken)
    yield broken
    db.set_engine(None)


def count_rows(engine: Engine) -> int:
    with engine.connect() as conn:
        return conn.execute(text("SELECT COUNT(*) FROM usuarios")).scalar_one()
