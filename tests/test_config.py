"""
Tests for configuration helpers and request validation.
"""

import pytest

from users_api.config import normalize_database_url
from users_api.database import Database
from users_api.utils.validators import ValidationError, extract_username, normalize_username


@pytest.mark.parametrize(
    "url, expected",
    [
        ("postgres://u:p@host:5432/db", "postgresql+psycopg://u:p@host:5432/db"),
        ("postgresql://u:p@host/db?sslmode=require", "postgresql+psycopg://u:p@host/db?sslmode=require"),
        ("postgresql+psycopg://u:p@host/db", "postgresql+psycopg://u:p@host/db"),
        ("sqlite:///users.sqlite3", "sqlite:///users.sqlite3"),
        (None, None),
        ("", ""),
    ],
)
def test_normalize_database_url(url, expected) -> None:
    assert normalize_database_url(url) == expected


def test_database_requires_url() -> None:
    with pytest.raises(RuntimeError):
        Database("")


def test_database_schema_translation(tmp_path) -> None:
    db = Database(f"sqlite:///{tmp_path / 'x.sqlite3'}", schema="run_1")
    try:
        assert db.schema == "run_1"
        assert db.engine.get_execution_options()["schema_translate_map"] == {None: "run_1"}
    finally:
        db.close()


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Trinity", "Trinity"),
        ("  Trinity ", "Trinity"),
        ("", None),
        ("   ", None),
        ("x" * 65, None),
        (None, None),
        (42, None),
    ],
)
def test_normalize_username(raw, expected) -> None:
    assert normalize_username(raw) == expected


def test_extract_username() -> None:
    assert extract_username({"username": " Neo "}) == "Neo"
    assert extract_username({"username": "Neo", "extra": 1}) == "Neo"
    assert extract_username({"username": "abc"}, max_length=3) == "abc"
    with pytest.raises(ValidationError, match="between 1 and 3"):
        extract_username({"username": "abcd"}, max_length=3)
    with pytest.raises(ValidationError, match="JSON object"):
        extract_username(None)
