"""
Error taxonomy and the HTTP mapping for it.

ValidationError / ConflictError -> 400, NotFoundError -> 404,
anything else (database failures included) -> 500 with a generic message.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Internal server error"


class BookkeepingError(ValueError):
    """Base class for domain-level errors."""

    status_code = 400


class ValidationError(BookkeepingError):
    """Missing or malformed required input."""


class ConflictError(BookkeepingError):
    """Natural key already taken."""


class NotFoundError(BookkeepingError):
    """Requested row does not exist."""

    status_code = 404


def missing_field(field: str) -> str:
    return f"Missing required field: {field}"


def not_numeric(field: str, value) -> str:
    return f"Field '{field}' must be numeric, got {value!r}"


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ()) if p != "body"]
        where = ".".join(loc) or "body"
        if err.get("type") == "extra_forbidden":
            parts.append(f"Unknown field: {where}")
        else:
            parts.append(f"{where}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts) or "Invalid request body"


async def bookkeeping_error_handler(request: Request, exc: BookkeepingError):
    logger.warning("%s %s -> %d: %s", request.method, request.url.path, exc.status_code, exc)
    return JSONResponse(status_code=exc.status_code, content={"detail": str(exc)})


async def request_validation_handler(request: Request, exc: RequestValidationError):
    message = _describe_validation_errors(exc)
    logger.warning("%s %s -> 400: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content={"detail": message})


async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": SERVER_ERROR_MESSAGE})


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": SERVER_ERROR_MESSAGE})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BookkeepingError, bookkeeping_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
