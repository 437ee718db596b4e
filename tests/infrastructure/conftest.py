"""Shared fixtures for repository tests against a SQLite file."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine, text

from kakeibo.infrastructure.schema import ensure_schema


@pytest.fixture
def sqlite_db_port(tmp_path):
    """Database port whose engine points at a fresh SQLite schema."""
    engine = create_engine(f"sqlite:///{tmp_path / 'kakeibo.db'}", future=True)
    db_port = MagicMock()
    db_port.get_engine.return_value = engine
    ensure_schema(db_port)
    yield db_port
    engine.dispose()


@pytest.fixture
def execute_sql(sqlite_db_port):
    """Run a statement against the test database, for seeding rows."""

    def _execute(statement: str, params=None) -> None:
        with sqlite_db_port.get_engine().begin() as conn:
            conn.execute(text(statement), params or {})

    return _execute
