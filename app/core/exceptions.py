"""
Store errors and the handler that turns them into HTTP responses.

Taxonomy:
- StoreError: any failed database operation (500)
- ConnectivityError: store unreachable or not connected (500)
- ConstraintError: insert rejected by the database (500)
- NotFoundError: missing row or document (404)

Messages are short and user-visible. No error codes.
"""
from typing import Optional

from fastapi import Request
from fastapi.responses import JSONResponse
from loguru import logger


class StoreError(Exception):
    """Base class for every store failure."""

    status_code = 500
    default_message = "DB 오류"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ConnectivityError(StoreError):
    default_message = "DB 연결 오류"


class ConstraintError(StoreError):
    default_message = "DB 오류"


class NotFoundError(StoreError):
    status_code = 404
    default_message = "없음"


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    """Convert an uncaught StoreError into {"error": message}."""
    if exc.status_code >= 500:
        logger.error(f"{type(exc).__name__}: {exc.message} | Path: {request.url.path}")
    else:
        logger.info(f"{type(exc).__name__}: {exc.message} | Path: {request.url.path}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
