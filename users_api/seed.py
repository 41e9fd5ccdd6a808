"""
Helpers that put the ``users`` table into a known state.

Used by the test fixtures and the ``flask reset-db`` / ``flask drop-db``
commands; request handlers never call into this module.
"""
from __future__ import annotations

import logging
from typing import List

from sqlalchemy.schema import CreateSchema, DropSchema

from users_api.database import Database
from users_api.models import User

logger = logging.getLogger(__name__)

# Inserted in this order after every reset, so ids run 1..n.
SEED_USERNAMES = ("James", "Mary", "Lauren", "Pedro", "Aisha")


def _users_table():
    return User.__table__


def create_schema(database: Database) -> None:
    """
    Create the database's schema namespace if one is configured.
    """
    if not database.schema:
        return
    with database.root_engine.begin() as conn:
        conn.execute(CreateSchema(database.schema, if_not_exists=True))
    logger.info(f"Created schema {database.schema}")


def drop_schema(database: Database) -> None:
    """
    Drop the database's schema namespace, and everything in it.
    """
    if not database.schema:
        return
    with database.root_engine.begin() as conn:
        conn.execute(DropSchema(database.schema, cascade=True, if_exists=True))
    logger.info(f"Dropped schema {database.schema}")


def drop_users_table(database: Database) -> None:
    """Drop the users table if it exists."""
    _users_table().drop(bind=database.engine, checkfirst=True)
    logger.info("Dropped users table")


def reset_users_table(database: Database) -> List[dict]:
    """
    Drop and recreate the users table, then insert the seed rows.

    Recreating the table restarts id generation, so the seed rows always get
    the same ids. Returns the seeded rows.
    """
    table = _users_table()
    table.drop(bind=database.engine, checkfirst=True)
    table.create(bind=database.engine)

    with database.session() as session:
        users = [User(username=username) for username in SEED_USERNAMES]
        session.add_all(users)
        session.flush()
        seeded = [user.to_dict() for user in users]

    logger.info(f"Reset users table with {len(seeded)} seed rows")
    return seeded
