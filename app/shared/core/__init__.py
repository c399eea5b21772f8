"""
Core utilities package for the Oyster Review Application.
Provides security, dependencies and the application exception hierarchy.
"""

from .exceptions import (
    ReviewAppException,
    AuthenticationError,
    AuthorizationError,
    ValidationError,
    NotFoundError,
    ConflictError,
    StoreError,
    FlowBusyError,
    InvalidTransitionError,
)

__all__ = [
    "ReviewAppException",
    "AuthenticationError",
    "AuthorizationError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "StoreError",
    "FlowBusyError",
    "InvalidTransitionError",
]
