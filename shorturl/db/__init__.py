"""Database module for the URL shortener service."""
from shorturl.db.base import get_engine, get_session_factory, init_db
from shorturl.db.session import get_db, db_transaction

__all__ = [
    "get_engine",
    "get_session_factory",
    "init_db",
    "get_db",
    "db_transaction",
]
