
from typing import Any, Dict, List, Optional

from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

logger = logging.getLogger(__name__)


class MovieReviewException(Exception):
    """Base exception for the application"""
    status_code = 500
    code = "internal_error"

    def __init__(self, message: str, headers: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.headers = headers


class ValidationError(MovieReviewException):
    status_code = 400
    code = "validation_error"

    def __init__(self, message: str = "Validation Error", errors: Optional[List[Dict[str, str]]] = None):
        super().__init__(message)
        self.errors = errors or []


class NotFoundError(MovieReviewException):
    status_code = 404
    code = "not_found"


class ConflictError(MovieReviewException):
    # The web client treats every rejected write as a 400
    status_code = 400
    code = "conflict"


class InvalidCredentialsError(MovieReviewException):
    status_code = 400
    code = "invalid_credentials"

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class UnauthorizedError(MovieReviewException):
    status_code = 401
    code = "unauthorized"

    def __init__(self, message: str = "Access token required"):
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class ForbiddenError(MovieReviewException):
    status_code = 403
    code = "forbidden"


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "unknown")


async def app_exception_handler(request: Request, exc: MovieReviewException):
    """
    Map domain exceptions to their status code and a machine-readable body.
    """
    request_id = _request_id(request)
    logger.info(
        f"{exc.__class__.__name__}: {exc.message}",
        extra={"request_id": request_id, "path": request.url.path, "code": exc.code},
    )

    content: Dict[str, Any] = {"error": exc.message, "code": exc.code, "request_id": request_id}
    if isinstance(exc, ValidationError):
        content["errors"] = exc.errors

    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


async def global_exception_handler(request: Request, exc: Exception):
    """
    Catch-all exception handler to execute last (if registered appropriately).
    Returns 500 JSON response and hides internal error details.
    """
    request_id = _request_id(request)

    logger.error(
        "Unhandled exception occurred",
        extra={"request_id": request_id, "path": request.url.path},
        exc_info=exc
    )

    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal Server Error",
            "code": "internal_error",
            "message": "An unexpected error occurred. Please contact support.",
            "request_id": request_id
        },
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    Handle standard Starlette/FastAPI HTTPExceptions (unknown routes, wrong methods).
    """
    request_id = _request_id(request)

    # Log 5xx errors as errors, 4xx as info
    if exc.status_code >= 500:
        logger.error(f"HTTP {exc.status_code} error", extra={"request_id": request_id, "detail": exc.detail})
    else:
        logger.info(f"HTTP {exc.status_code} error", extra={"request_id": request_id, "detail": exc.detail})

    code = "not_found" if exc.status_code == 404 else "http_error"
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail, "code": code, "request_id": request_id},
        headers=getattr(exc, "headers", None),
    )


def format_validation_errors(errors) -> List[Dict[str, str]]:
    """Flatten pydantic error dicts into [{"field", "message"}]."""
    formatted = []
    for error in errors:
        # Drop the "body"/"query"/"path" location prefix
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        formatted.append({"field": ".".join(loc) or "request", "message": error.get("msg", "Invalid value")})
    return formatted


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Handle Pydantic validation errors as a 400 with a per-field error list.
    """
    request_id = _request_id(request)
    errors = format_validation_errors(exc.errors())
    logger.info("Validation error", extra={"request_id": request_id, "errors": errors})

    return JSONResponse(
        status_code=400,
        content={
            "error": "Validation Error",
            "code": "validation_error",
            "errors": errors,
            "request_id": request_id
        },
    )
