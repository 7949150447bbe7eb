"""
Error envelope for the API.

Every error leaves the service as {"message": "..."}:
- HTTPException (404 not found, 405, ...) keeps its status code
- Request validation failures (bad JSON, bad date, non-numeric RMPaid,
  malformed id) become 400
- Store failures (SQLAlchemyError) become 400 with the driver's message
"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def format_validation_errors(errors) -> str:
    """
    Flatten pydantic error dicts into one readable line.

    Example:
        [{"loc": ("body", "permitVisaExpiry"), "msg": "Input should be a valid date ..."}]
        -> "permitVisaExpiry: Input should be a valid date ..."
    """
    parts = []
    for error in errors:
        loc = ".".join(str(p) for p in error.get("loc", ()) if p != "body")
        msg = error.get("msg", "Invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "Invalid request"


def store_error_message(exc: SQLAlchemyError) -> str:
    """Prefer the DB-API driver's message over SQLAlchemy's wrapped text."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    message = format_validation_errors(exc.errors())
    logger.warning(f"{request.method} {request.url.path} -> 400 validation error: {message}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": message},
    )


async def store_exception_handler(request: Request, exc: SQLAlchemyError):
    message = store_error_message(exc)
    logger.error(f"{request.method} {request.url.path} -> 400 store error: {message}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": message},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the {"message": ...} handlers on the app."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, store_exception_handler)
