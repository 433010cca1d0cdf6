"""Main application module.

This module builds the FastAPI application, includes routes,
and configures middleware, exception handlers and the store lifecycle.
"""

import asyncio
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from shorturl.api import api_router
from shorturl.core.config import Settings, settings as default_settings
from shorturl.core.logging import setup_logging
from shorturl.db.base import get_engine, get_session_factory, init_db
from shorturl.middleware.logging import add_logging_middleware
from shorturl.repositories.base import storage_error_message


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create the FastAPI application.

    The mapping store is owned by the application: the engine is created
    and the schema initialised on startup, and the engine is disposed on
    shutdown, both in the application lifespan. Request handlers reach it
    only through ``get_db``.
    """
    settings = settings or default_settings
    logger = setup_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Open the mapping store on startup and release it on shutdown."""
        logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
        logger.info(f"Environment: {settings.ENVIRONMENT.value}")

        engine = get_engine(settings)
        await init_db(engine)
        app.state.engine = engine
        app.state.session_factory = get_session_factory(engine)
        # Every in-memory session shares one connection
        app.state.store_lock = asyncio.Lock() if settings.is_memory_database else None

        logger.info(f"listening on port {settings.PORT}")

        yield

        logger.info(f"Shutting down {settings.APP_NAME}")
        await engine.dispose()
        app.state.engine = None
        app.state.session_factory = None
        app.state.store_lock = None

    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    app.state.settings = settings

    if settings.REQUEST_LOGGING_ENABLED:
        add_logging_middleware(app)

    app.include_router(api_router)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle validation errors with detailed information."""
        logger.warning(f"Request validation error: {exc}")
        return JSONResponse(
            status_code=422,
            content={"error": "Validation error", "errors": jsonable_encoder(exc.errors())}
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler to catch and log all unhandled exceptions."""
        error_id = f"error-{time.time()}"
        if isinstance(exc, SQLAlchemyError):
            message = storage_error_message(exc)
        else:
            message = str(exc)

        logger.opt(exception=exc).error(
            "Unhandled exception in {method} {path}",
            method=request.method,
            path=request.url.path,
            error_id=error_id,
        )

        return JSONResponse(
            status_code=500,
            content={"error": message}
        )

    return app


app = create_app()
