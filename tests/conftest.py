"""
Shared fixtures for the Users API test suite.

Tests run serially against one database for the whole session and the
users table is reset to the seed rows before every test. By default the
database is a throwaway SQLite file; set TEST_DATABASE_URL to run against
PostgreSQL instead, in which case the session gets its own schema that is
dropped again at the end.
"""

from __future__ import annotations

import os
import uuid
from typing import Iterator, List

import pytest
from flask import Flask
from flask.testing import FlaskClient

from users_api import create_app
from users_api.config import TestingConfig
from users_api.database import Database
from users_api.seed import create_schema, drop_schema, reset_users_table


@pytest.fixture(scope="session")
def database(tmp_path_factory: pytest.TempPathFactory) -> Iterator[Database]:
    """One Database for the session, closed when the session ends"""
    url = os.environ.get("TEST_DATABASE_URL")
    if url and not url.startswith("sqlite"):
        db = Database(url, schema=f"test_{uuid.uuid4().hex[:12]}")
    else:
        path = tmp_path_factory.mktemp("db") / "users.sqlite3"
        db = Database(url or f"sqlite:///{path}")
    create_schema(db)
    yield db
    drop_schema(db)
    db.close()


@pytest.fixture(scope="session")
def app(database: Database) -> Flask:
    return create_app(TestingConfig, database=database)


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Flask client fixture"""
    return app.test_client()


@pytest.fixture(autouse=True)
def seed_users(database: Database) -> List[dict]:
    """Reset the users table to the seed rows before every test"""
    return reset_users_table(database)
