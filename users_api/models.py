"""
Database models.
"""
from sqlalchemy import Column, Integer, Text

from users_api.database import Base


class User(Base):
    """
    A row of the ``users`` table. Ids are generated by the database and are
    never reused while the table exists.
    """

    __tablename__ = "users"
    # SQLite would otherwise hand a deleted max id back out
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<User id={self.id!r} username={self.username!r}>"

    def to_dict(self) -> dict:
        return {"id": self.id, "username": self.username}
