"""
Database utilities and SQLAlchemy session management.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Generator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import QueuePool

from users_api.config import normalize_database_url

logger = logging.getLogger(__name__)

Base = declarative_base()


class Database:
    """
    Owns the engine (and with it the connection pool) for one database.

    The handle is created once, passed to whatever needs it and closed by
    whoever created it. When ``schema`` is set every statement is routed to
    that schema through ``schema_translate_map``, so the same models can be
    pointed at a throwaway namespace.
    """

    def __init__(
        self,
        url: str,
        schema: Optional[str] = None,
        pool_size: int = 5,
        pool_timeout: int = 10,
        pool_recycle: int = 3600,
        echo: bool = False,
    ):
        if not url:
            raise RuntimeError("A database URL is required to open a Database")
        url = normalize_database_url(url)

        connect_args = {}
        if url.startswith("sqlite"):
            # Required for SQLite when used across multiple threads (WSGI workers).
            connect_args["check_same_thread"] = False
        elif url.startswith("postgresql"):
            # PostgreSQL connection timeout (in seconds)
            connect_args["connect_timeout"] = 10

        engine = create_engine(
            url,
            poolclass=QueuePool,
            pool_size=pool_size,
            pool_pre_ping=True,
            pool_recycle=pool_recycle,
            pool_timeout=pool_timeout,
            echo=echo,
            connect_args=connect_args,
        )
        self.schema = schema
        self.root_engine = engine
        if schema:
            engine = engine.execution_options(schema_translate_map={None: schema})
        self.engine: Engine = engine
        self._session_factory = sessionmaker(
            bind=self.engine,
            autoflush=False,
            expire_on_commit=False,
        )
        self._closed = False

    @classmethod
    def from_config(cls, config) -> "Database":
        """
        Build a Database from a Flask config mapping.
        """
        return cls(
            config["DATABASE_URL"],
            schema=config.get("DATABASE_SCHEMA"),
            pool_size=config.get("DB_POOL_SIZE", 5),
            pool_timeout=config.get("DB_POOL_TIMEOUT", 10),
            pool_recycle=config.get("DB_POOL_RECYCLE", 3600),
            echo=config.get("SQL_ECHO", False),
        )

    @property
    def dialect(self) -> str:
        return self.engine.dialect.name

    @property
    def closed(self) -> bool:
        return self._closed

    def init_db(self) -> None:
        """
        Import models and create tables that do not exist yet.
        """
        from users_api import models  # noqa: F401  (side-effect import)
        try:
            Base.metadata.create_all(bind=self.engine)
        except Exception as e:
            logging.error(f"Error initializing database: {e}", exc_info=True)
            raise

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """
        Context manager that yields a SQLAlchemy session and guarantees cleanup.
        """
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def close(self) -> None:
        """
        Dispose of the pool. Safe to call more than once.
        """
        if self._closed:
            return
        self.root_engine.dispose()
        self._closed = True
        logger.info("Database connection pool closed")
