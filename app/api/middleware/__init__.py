# 📄 File: app/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file organizes the helpers that sit in front of every API request, recording what happened
# and turning errors into consistent answers.
# 🧪 Purpose (Technical Summary):
# Package initialization for API middleware: request logging middleware, exception handler
# registration and their shared configuration.
# 🔗 Dependencies:
# FastAPI middleware components, app.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# app.main.py, FastAPI application setup, middleware registration

"""
Oyster Review API Middleware Package

Middleware Components:
    - RequestLoggingMiddleware: request id correlation and request/response logging
    - register_exception_handlers: consistent JSON error bodies for every failure

Usage:
    from app.api.middleware import RequestLoggingMiddleware, register_exception_handlers

    app.add_middleware(RequestLoggingMiddleware)
    register_exception_handlers(app)
"""

from typing import Any, Dict

# Middleware configuration constants
MIDDLEWARE_CONFIG = {
    "logging": {
        "enabled": True,
        "exclude_paths": [
            "/api/v1/health",
            "/api/v1/health/live",
            "/api/v1/health/ready",
        ],
        "slow_request_threshold": 2.0,
    },
}


def get_middleware_config(middleware_name: str) -> Dict[str, Any]:
    """
    Get configuration for a specific middleware

    Args:
        middleware_name: Name of the middleware

    Returns:
        Middleware configuration dictionary
    """
    return MIDDLEWARE_CONFIG.get(middleware_name, {})


def should_exclude_path(middleware_name: str, path: str) -> bool:
    """
    Check if a path should be excluded from middleware processing

    Args:
        middleware_name: Name of the middleware
        path: Request path to check

    Returns:
        True if path should be excluded, False otherwise
    """
    exclude_paths = get_middleware_config(middleware_name).get("exclude_paths", [])

    # Check for exact matches and prefix matches
    for exclude_path in exclude_paths:
        if path == exclude_path or path.startswith(exclude_path + "/"):
            return True

    return False


from .error_handling import create_error_response, register_exception_handlers  # noqa: E402
from .logging import RequestLoggingMiddleware  # noqa: E402

__all__ = [
    "MIDDLEWARE_CONFIG",
    "get_middleware_config",
    "should_exclude_path",
    "create_error_response",
    "register_exception_handlers",
    "RequestLoggingMiddleware",
]
