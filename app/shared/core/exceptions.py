# 📄 File: app/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# Names every kind of failure the Oyster Review app knows about, so a bad rating, a missing
# review or an unreachable store each produce their own clear message.
# 🧪 Purpose (Technical Summary):
# Exception hierarchy rooted at ReviewAppException. Each class carries an HTTP status,
# a stable error code and a details dict consumed by the API exception handlers and by
# the review flow when deciding whether a failure is retryable.
# 🔗 Dependencies:
# FastAPI status constants, typing
# 🔄 Connected Modules / Calls From:
# Review flow controller, stores, exception handlers, API endpoints, domain services

from typing import Any, Dict, Optional
from fastapi import status


class ReviewAppException(Exception):
    """
    Root of every error raised by the application.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)


def _collect(details: Optional[Dict[str, Any]], **values: Any) -> Dict[str, Any]:
    merged = dict(details or {})
    merged.update({key: value for key, value in values.items() if value is not None})
    return merged


# =============================================================================
# ACCESS EXCEPTIONS
# =============================================================================

class AuthenticationError(ReviewAppException):
    """Missing, expired or malformed bearer token."""

    def __init__(self, message: str = "Authentication failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_401_UNAUTHORIZED, details, "AUTHENTICATION_ERROR")


class AuthorizationError(ReviewAppException):
    """
    The caller is known but may not touch the resource, e.g. editing
    somebody else's review.
    """

    def __init__(
        self,
        message: str = "Access denied",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        user_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message,
            status.HTTP_403_FORBIDDEN,
            _collect(details, resource_type=resource_type, resource_id=resource_id, user_id=user_id),
            "AUTHORIZATION_ERROR",
        )


# =============================================================================
# INPUT & RESOURCE EXCEPTIONS
# =============================================================================

class ValidationError(ReviewAppException):
    """
    Invalid review input. Raised before any store call, so the draft
    stays editable.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        constraint: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.field = field
        super().__init__(
            message,
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            _collect(
                details,
                field=field,
                value=None if value is None else str(value),
                constraint=constraint,
            ),
            "VALIDATION_ERROR",
        )


class NotFoundError(ReviewAppException):
    """The referenced user or review does not exist."""

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message,
            status.HTTP_404_NOT_FOUND,
            _collect(details, resource_type=resource_type, resource_id=resource_id),
            "NOT_FOUND",
        )


class ConflictError(ReviewAppException):
    """
    A review for the same (author, subject) pair was written by another
    submission first.
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        resource_type: Optional[str] = None,
        conflict_field: Optional[str] = None,
        existing_value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message,
            status.HTTP_409_CONFLICT,
            _collect(
                details,
                resource_type=resource_type,
                conflict_field=conflict_field,
                existing_value=None if existing_value is None else str(existing_value),
            ),
            "CONFLICT_ERROR",
        )


class StoreError(ReviewAppException):
    """
    The backing store could not be reached or answered with garbage.
    Transient; the draft is kept for a retry.
    """

    def __init__(
        self,
        message: str = "Store unavailable",
        operation: Optional[str] = None,
        store: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message,
            status.HTTP_503_SERVICE_UNAVAILABLE,
            _collect(details, operation=operation, store=store),
            "STORE_ERROR",
        )


# =============================================================================
# REVIEW FLOW EXCEPTIONS
# =============================================================================

class FlowBusyError(ReviewAppException):
    """A review flow already has a request in flight."""

    def __init__(self, message: str = "A submission is already in progress", state: Optional[str] = None):
        super().__init__(message, status.HTTP_409_CONFLICT, _collect(None, state=state), "FLOW_BUSY")


class InvalidTransitionError(ReviewAppException):
    """
    The current flow state does not allow the action, e.g. confirming an
    update when no duplicate was detected.
    """

    def __init__(self, action: str, state: str):
        super().__init__(
            f"Cannot {action} while {state}",
            status.HTTP_409_CONFLICT,
            {"action": action, "state": state},
            "INVALID_TRANSITION",
        )


def is_retryable(exception: Exception) -> bool:
    """
    Check if a failed store call may succeed when repeated.

    A ConflictError resolves on retry because the rerun detects the
    duplicate. NotFoundError is terminal.
    """
    return isinstance(exception, (StoreError, ConflictError))
