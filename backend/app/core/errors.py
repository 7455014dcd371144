"""
Error taxonomy and the handlers that turn it into JSON responses.

Every failure leaves the process running and reaches the client as
``{"error": <message>, "status": <code>}``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Base class for errors raised by the store and serializer."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class NotFound(StoreError):
    status_code = status.HTTP_404_NOT_FOUND


class ValidationError(StoreError):
    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(StoreError):
    status_code = status.HTTP_409_CONFLICT


def error_body(message: str, status_code: int, field: Optional[str] = None) -> dict:
    body = {"error": message, "status": status_code}
    if field:
        body["field"] = field
    return body


def describe_validation_errors(errors) -> tuple[str, Optional[str]]:
    """
    Reduce a list of pydantic error dicts to one message and field name

    Args:
        errors: ``exc.errors()`` from pydantic or FastAPI

    Returns:
        Tuple of (message, field) for the first failing field
    """
    if not errors:
        return "Invalid request body", None

    first = errors[0]
    # FastAPI prefixes body errors with "body"
    loc = [str(part) for part in first.get("loc", ()) if part != "body"]
    field = ".".join(loc) or None

    if first.get("type") == "json_invalid":
        return "Malformed JSON body", None
    if field:
        return f"{field}: {first.get('msg')}", field
    return str(first.get("msg")), None


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    if isinstance(exc, ValidationError):
        logger.warning(f"Validation failed on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.message, exc.status_code, exc.field),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message, field = describe_validation_errors(exc.errors())
    logger.warning(f"Validation failed on {request.method} {request.url.path}: {message}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(message, status.HTTP_400_BAD_REQUEST, field),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail), exc.status_code),
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
