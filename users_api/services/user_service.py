"""
Users data access backed by SQLAlchemy.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import delete, func, select

from users_api.database import Database
from users_api.models import User

logger = logging.getLogger(__name__)

# Largest value the INTEGER id column holds on every supported backend
MAX_USER_ID = 2**31 - 1


class UserService:
    """
    CRUD operations against the ``users`` table.

    Every call checks a session out of the pool for the length of the call.
    A missing row comes back as ``None``; database errors propagate.
    """

    def __init__(self, database: Database):
        self.database = database

    def list_users(self, username: Optional[str] = None) -> List[dict]:
        """
        Return every user ordered by id, or only those whose username
        equals ``username`` ignoring case.
        """
        stmt = select(User).order_by(User.id)
        normalized = self._normalize(username)
        if normalized:
            stmt = stmt.where(func.lower(User.username) == normalized)

        with self.database.session() as session:
            rows = session.execute(stmt).scalars().all()
            return [row.to_dict() for row in rows]

    def get_user_by_id(self, user_id: int) -> Optional[dict]:
        if not self._storable_id(user_id):
            return None
        with self.database.session() as session:
            row = session.get(User, user_id)
            return row.to_dict() if row else None

    def insert_user(self, username: str) -> dict:
        """
        Insert a user and return the stored row, generated id included.
        """
        with self.database.session() as session:
            row = User(username=username)
            session.add(row)
            session.flush()
            created = row.to_dict()

        logger.info(f"Created user {created['id']} ({created['username']})")
        return created

    def delete_user_by_id(self, user_id: int) -> Optional[dict]:
        """
        Delete a user in one DELETE ... RETURNING statement and return the
        removed row, or None if no row matched.
        """
        if not self._storable_id(user_id):
            return None
        stmt = (
            delete(User)
            .where(User.id == user_id)
            .returning(User.id, User.username)
        )
        with self.database.session() as session:
            row = session.execute(stmt).first()
        if row is None:
            return None
        deleted = {"id": row.id, "username": row.username}

        logger.info(f"Deleted user {deleted['id']} ({deleted['username']})")
        return deleted

    # Internal helpers -------------------------------------------------

    def _storable_id(self, user_id: int) -> bool:
        return 0 < user_id <= MAX_USER_ID

    def _normalize(self, username: Optional[str]) -> Optional[str]:
        if username is None:
            return None
        username = str(username).strip()
        if not username:
            return None
        return username.lower()
