# 📄 File: app/shared/core/dependencies.py
#
# 🧭 Purpose (Layman Explanation):
# Shared helpers that figure out who is making a request so reviews get the right author.
#
# 🧪 Purpose (Technical Summary):
# FastAPI dependencies for bearer-token authentication producing a CurrentUser,
# and binding the user to the logging context.
#
# 🔗 Dependencies:
# - fastapi.security.HTTPBearer
# - app.shared.core.security (token verification)
#
# 🔄 Connected Modules / Calls From:
# - Review and profile API endpoints

import logging
from typing import Any, Dict, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.shared.utils.logging import bind_user

from .exceptions import AuthenticationError
from .security import verify_token

logger = logging.getLogger(__name__)

# Security scheme for OpenAPI documentation
security = HTTPBearer(auto_error=False)


class CurrentUser:
    """User information extracted from JWT token."""

    def __init__(
        self,
        user_id: str,
        email: Optional[str] = None,
        token_payload: Optional[Dict[str, Any]] = None
    ):
        self.user_id = user_id
        self.email = email
        self.token_payload = token_payload or {}


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> CurrentUser:
    """
    Get current authenticated user from the bearer token.

    Raises:
        AuthenticationError: If no token is sent or it does not verify
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Not authenticated")

    payload = verify_token(credentials.credentials)

    current_user = CurrentUser(
        user_id=payload["sub"],
        email=payload.get("email"),
        token_payload=payload,
    )
    bind_user(current_user.user_id)

    logger.debug(f"Current user retrieved: {current_user.user_id}")
    return current_user

