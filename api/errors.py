"""Exception handlers turning errors into plain-text responses."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError
from pymongo.errors import DuplicateKeyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from services.errors import ServiceError
from utils.logger import setup_logger

logger = setup_logger(__name__)


def first_error_message(errors) -> str:
    """Describe the first field error of a pydantic error list."""
    if not errors:
        return "Bad Request"
    error = errors[0]
    loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query")]
    field = loc[0] if loc else "request"

    if error.get("type") == "missing":
        return f"Path `{field}` is required."
    if error.get("type") == "value_error" and "error" in error.get("ctx", {}):
        return str(error["ctx"]["error"])
    return f"`{field}`: {error.get('msg', 'invalid value')}"


async def validation_error_handler(request: Request, exc) -> PlainTextResponse:
    message = first_error_message(exc.errors())
    logger.warning(f"Validation error on {request.url.path}: {message}")
    return PlainTextResponse(message, status_code=400)


async def duplicate_key_handler(request: Request, exc: DuplicateKeyError) -> PlainTextResponse:
    logger.warning(f"Duplicate key on {request.url.path}: {exc}")
    return PlainTextResponse("Duplicate key", status_code=403)


async def service_error_handler(request: Request, exc: ServiceError) -> PlainTextResponse:
    logger.warning(f"{type(exc).__name__} on {request.url.path}: {exc.message}")
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    message = "not found" if exc.status_code == 404 else str(exc.detail)
    return PlainTextResponse(message, status_code=exc.status_code, headers=getattr(exc, "headers", None))


async def unhandled_error_handler(request: Request, exc: Exception) -> PlainTextResponse:
    logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=True)
    return PlainTextResponse("Internal Server Error", status_code=500)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach every handler to the application."""
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(DuplicateKeyError, duplicate_key_handler)
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
