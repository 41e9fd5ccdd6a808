"""
Application configuration.
"""
import os

from dotenv import load_dotenv

load_dotenv()


def _as_bool(value, default=False):
    if value is None:
        return default
    return str(value).strip().lower() in ('1', 'true', 'yes', 'on')


def normalize_database_url(url):
    """
    Point bare PostgreSQL URLs at the psycopg (v3) driver.

    Hosted providers hand out ``postgres://`` or ``postgresql://`` strings;
    SQLAlchemy would resolve both to psycopg2, which is not installed.
    """
    if not url:
        return url
    if url.startswith('postgres://'):
        url = 'postgresql://' + url[len('postgres://'):]
    if url.startswith('postgresql://'):
        url = 'postgresql+psycopg://' + url[len('postgresql://'):]
    return url


class Config:
    """Base configuration."""
    DEBUG = _as_bool(os.environ.get('FLASK_DEBUG'))
    TESTING = False

    # Database
    DATABASE_URL = normalize_database_url(os.environ.get('DATABASE_URL'))
    DATABASE_SCHEMA = os.environ.get('DATABASE_SCHEMA') or None
    DB_POOL_SIZE = int(os.environ.get('DB_POOL_SIZE', '5'))
    DB_POOL_TIMEOUT = int(os.environ.get('DB_POOL_TIMEOUT', '10'))
    DB_POOL_RECYCLE = int(os.environ.get('DB_POOL_RECYCLE', '3600'))
    SQL_ECHO = _as_bool(os.environ.get('SQL_ECHO'))
    CREATE_TABLES_ON_STARTUP = _as_bool(os.environ.get('CREATE_TABLES_ON_STARTUP'), default=True)

    # Users
    MAX_USERNAME_LENGTH = 64


class TestingConfig(Config):
    """Configuration used by the test suite."""
    TESTING = True
    DATABASE_URL = normalize_database_url(os.environ.get('TEST_DATABASE_URL'))
    DATABASE_SCHEMA = None
    CREATE_TABLES_ON_STARTUP = False
