"""Session management for database operations.

This module provides utilities for handling SQLAlchemy async sessions
with proper lifecycle management, error handling, and transaction support.
It includes dependency injection patterns optimized for FastAPI.
"""

from typing import AsyncGenerator, Callable, Optional, TypeVar
import logging
import inspect
from contextlib import AsyncExitStack
from functools import wraps

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError

from shorturl.db.base import get_session

logger = logging.getLogger(__name__)

# Generic return type for function decorators
T = TypeVar("T")


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions.

    Sessions come from the factory the application stored on its state at
    startup, so handlers never reach for a global connection. When the
    application also stored a ``store_lock`` (in-memory SQLite, where every
    session shares one connection) the lock is held for the whole life of
    the session, so one request's rollback cannot discard another's insert.

    Yields:
        AsyncSession: A SQLAlchemy async session object.
    """
    session_factory = request.app.state.session_factory
    store_lock = getattr(request.app.state, "store_lock", None)

    async with AsyncExitStack() as stack:
        if store_lock is not None:
            await stack.enter_async_context(store_lock)
        session = await stack.enter_async_context(get_session(session_factory))
        try:
            yield session
        except SQLAlchemyError:
            logger.exception("Database error occurred")
            await session.rollback()
            raise
        except Exception:
            await session.rollback()
            raise


def db_transaction(db_param_name: Optional[str] = None) -> Callable:
    """Decorator to wrap functions in a database transaction.

    Automatically finds the database session parameter, commits on success or
    rolls back on error. The session parameter is located by name when
    ``db_param_name`` is given, otherwise by its ``AsyncSession`` annotation.

    Args:
        db_param_name: Optional name of the database session parameter.

    Returns:
        Callable: Decorator function

    Example:
        ```python
        @db_transaction(db_param_name="db")
        async def create(self, db: AsyncSession, long_url: str) -> ShortURL:
            ...
        ```

    Raises:
        ValueError: If no suitable database session parameter is found
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        parameters = inspect.signature(func).parameters
        db_param_pos = None
        db_param_key = None

        for i, (param_name, param) in enumerate(parameters.items()):
            is_async_session = param.annotation is AsyncSession

            if db_param_name and param_name == db_param_name:
                db_param_pos = i
                db_param_key = param_name
                break
            elif is_async_session and db_param_name is None:
                db_param_pos = i
                db_param_key = param_name
                break

        if db_param_key is None:
            logger.warning(
                f"Unable to find database session parameter in function '{func.__name__}'"
            )

        @wraps(func)
        async def wrapper(*args, **kwargs):
            db = None

            if db_param_key is not None and db_param_key in kwargs:
                db = kwargs[db_param_key]
            elif db_param_pos is not None and len(args) > db_param_pos:
                db = args[db_param_pos]
            else:
                for value in list(args) + list(kwargs.values()):
                    if isinstance(value, AsyncSession):
                        db = value
                        break

            if db is None:
                raise ValueError(
                    f"Database session not found in function arguments for '{func.__name__}'"
                )

            try:
                result = await func(*args, **kwargs)
                await db.commit()
                return result
            except Exception as e:
                await db.rollback()
                logger.error(f"Transaction failed in '{func.__name__}': {e}")
                raise

        return wrapper
    return decorator
