"""
Security utilities for JWT creation and validation.
Identifies the author of a review submission and the viewer of a profile.
"""

import logging
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Any, Dict, Optional

from jose import JWTError, jwt

from ..config.settings import get_settings
from .exceptions import AuthenticationError

logger = logging.getLogger(__name__)


class SecurityManager:
    """
    Centralized security manager for bearer token handling.
    """

    def __init__(self):
        self.settings = get_settings()
        self.algorithm = self.settings.JWT_ALGORITHM
        self.secret_key = self.settings.JWT_SECRET_KEY
        self.access_token_expire_minutes = self.settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES

    def create_access_token(
        self,
        data: Dict[str, Any],
        expires_delta: Optional[timedelta] = None
    ) -> str:
        """
        Create JWT access token with user data and expiration.

        Args:
            data: Token payload data (``sub`` carries the user id)
            expires_delta: Custom expiration time

        Returns:
            str: Encoded JWT token
        """
        to_encode = data.copy()
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta or timedelta(minutes=self.access_token_expire_minutes))

        to_encode.update({
            "exp": expire,
            "iat": now,
            "type": "access"
        })

        encoded_jwt = jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)
        logger.debug(f"Access token created for user: {data.get('sub')}")
        return encoded_jwt

    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify a JWT access token and return its payload.

        Raises:
            AuthenticationError: If the token is malformed, expired or has no subject
        """
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            logger.warning(f"JWT validation failed: {e}")
            raise AuthenticationError("Could not validate credentials") from e

        if payload.get("type") != "access":
            logger.warning(f"Token type mismatch. Got: {payload.get('type')}")
            raise AuthenticationError("Could not validate credentials")

        if not payload.get("sub"):
            logger.warning("Token missing subject (user_id)")
            raise AuthenticationError("Could not validate credentials")

        return payload


@lru_cache()
def get_security_manager() -> SecurityManager:
    """
    Get cached security manager instance.
    """
    return SecurityManager()


def create_access_token(
    user_id: str,
    email: Optional[str] = None,
    expires_delta: Optional[timedelta] = None
) -> str:
    """Create JWT access token for a user."""
    data = {"sub": user_id}
    if email:
        data["email"] = email
    return get_security_manager().create_access_token(data, expires_delta)


def verify_token(token: str) -> Dict[str, Any]:
    """Verify JWT access token."""
    return get_security_manager().verify_token(token)
