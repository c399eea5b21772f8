# 📄 File: app/api/middleware/error_handling.py
# 🧭 Purpose (Layman Explanation):
# This file catches any errors that happen in our app and turns them into friendly, consistent error messages,
# so a phone app always gets the same shape of answer whether a review was missing or the database was down.
# 🧪 Purpose (Technical Summary):
# FastAPI exception handlers that render ReviewAppException, request validation, HTTP, rate limit and
# unexpected errors as {"error": {"code", "message", "details", "request_id"}} with correlation headers.
# 🔗 Dependencies:
# FastAPI, starlette, slowapi, app.shared.core.exceptions, app.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# app.main.py (handler registration), all API endpoints

import logging
import traceback
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.shared.config.settings import get_settings
from app.shared.core.exceptions import ReviewAppException
from app.shared.utils.logging import get_request_id

logger = logging.getLogger(__name__)


def _request_id(request: Request) -> Optional[str]:
    # The 500 handler runs outside the logging middleware's context, so prefer request.state
    return getattr(request.state, "request_id", None) or get_request_id() or None


# Utility functions for error handling
def create_error_response(
    error_code: str,
    message: str,
    status_code: int = 500,
    details: Optional[Dict[str, Any]] = None,
    request_id: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    """
    Create a standardized error response

    Args:
        error_code: Error code identifier
        message: Human-readable error message
        status_code: HTTP status code
        details: Additional error details
        request_id: Request correlation ID
        headers: Extra response headers

    Returns:
        JSON error response
    """
    error_response = {
        "error": {
            "code": error_code,
            "message": message,
            "details": details or {},
            "request_id": request_id,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
    }

    response = JSONResponse(
        status_code=status_code,
        content=error_response,
        headers=headers,
    )

    if request_id:
        response.headers["X-Request-ID"] = request_id
    response.headers["X-Error-Code"] = error_code

    return response


def handle_validation_error(exc: RequestValidationError, request_id: Optional[str] = None) -> JSONResponse:
    """
    Handle request body / path validation errors

    Args:
        exc: FastAPI request validation exception
        request_id: Request correlation ID

    Returns:
        JSON error response
    """
    validation_errors = []
    for error in exc.errors():
        validation_errors.append({
            "field": ".".join(str(loc) for loc in error.get("loc", [])),
            "message": error.get("msg", "Validation error"),
            "type": error.get("type", "validation_error"),
        })

    return create_error_response(
        error_code="VALIDATION_ERROR",
        message="Request validation failed",
        status_code=422,
        details={"validation_errors": validation_errors},
        request_id=request_id,
    )


def handle_rate_limit_error(limit: str, request_id: Optional[str] = None) -> JSONResponse:
    """
    Handle rate limit exceeded errors

    Args:
        limit: Rate limit that was exceeded
        request_id: Request correlation ID

    Returns:
        JSON error response with a Retry-After header
    """
    return create_error_response(
        error_code="RATE_LIMIT_EXCEEDED",
        message=f"Rate limit of {limit} exceeded. Please try again later.",
        status_code=429,
        details={"rate_limit": limit},
        request_id=request_id,
        headers={"Retry-After": "60"},
    )


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

async def review_app_exception_handler(request: Request, exc: ReviewAppException) -> JSONResponse:
    request_id = _request_id(request)

    if exc.status_code >= 500:
        logger.error(f"Server error in {request.method} {request.url.path}: {exc.error_code} {exc.message}")
    else:
        logger.info(f"Client error in {request.method} {request.url.path}: {exc.error_code} {exc.message}")

    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return create_error_response(
        error_code=exc.error_code,
        message=exc.message,
        status_code=exc.status_code,
        details=exc.details,
        request_id=request_id,
        headers=headers,
    )


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(f"Request validation failed for {request.method} {request.url.path}")
    return handle_validation_error(exc, _request_id(request))


async def rate_limit_exception_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    logger.warning(f"Rate limit exceeded for {request.method} {request.url.path}")
    return handle_rate_limit_error(str(exc.detail), _request_id(request))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return create_error_response(
        error_code=f"HTTP_{exc.status_code}",
        message=str(exc.detail),
        status_code=exc.status_code,
        request_id=_request_id(request),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    request_id = _request_id(request)
    logger.error(
        f"Unhandled error in {request.method} {request.url.path}: {type(exc).__name__}: {exc}",
        exc_info=exc,
    )

    details: Dict[str, Any] = {}
    settings = get_settings()
    # Add debug information in development
    if settings.DEBUG and not settings.is_production:
        details["debug"] = {
            "exception_type": type(exc).__name__,
            "exception_message": str(exc),
            "traceback": traceback.format_exception(type(exc), exc, exc.__traceback__),
        }

    return create_error_response(
        error_code="INTERNAL_SERVER_ERROR",
        message="An internal server error occurred",
        status_code=500,
        details=details,
        request_id=request_id,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register the application's exception handlers on a FastAPI app.
    """
    app.add_exception_handler(ReviewAppException, review_app_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    # RateLimitExceeded is an HTTPException subclass; the more specific handler wins
    app.add_exception_handler(RateLimitExceeded, rate_limit_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
