"""
Request logging middleware for FastAPI using Loguru.

Every request is tagged with a request id, timed, and written to the
REQUEST log level once the response is ready.
"""

import time
import uuid
from typing import Any, Dict

from fastapi import Request, Response
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware

from shorturl.core.logging import REQUEST_LEVEL, register_request_level

REQUEST_ID_HEADER = "X-Request-ID"


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Access logging middleware.

    Features:
    - Request ID bound to every log record of the request and echoed in the response
    - Request duration in milliseconds
    - Client IP with X-Forwarded-For support
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        start_time = time.time()

        with logger.contextualize(request_id=request_id):
            response = await call_next(request)

        response.headers[REQUEST_ID_HEADER] = request_id

        process_time = time.time() - start_time

        client_ip = request.client.host if request.client else "unknown"
        if "X-Forwarded-For" in request.headers:
            forwarded_ips = request.headers["X-Forwarded-For"].split(",")
            if forwarded_ips:
                client_ip = forwarded_ips[0].strip()

        log_record: Dict[str, Any] = {
            "request_id": request_id,
            "client_ip": client_ip,
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "process_time_ms": round(process_time * 1000, 2),
        }

        logger.log(
            REQUEST_LEVEL,
            "{method} {path} {status_code} {process_time_ms}ms {client_ip} {request_id}",
            **log_record,
        )

        return response


def add_logging_middleware(app) -> None:
    """Add the request logging middleware to the FastAPI application."""
    register_request_level()
    app.add_middleware(LoggingMiddleware)
