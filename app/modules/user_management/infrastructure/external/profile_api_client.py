# 📄 File: app/modules/user_management/infrastructure/external/profile_api_client.py
# 🧭 Purpose (Layman Explanation):
# Fetches someone's public profile from the review web service, so a remote app can show the same
# friends page (or "this list is private") as the website.
#
# 🧪 Purpose (Technical Summary):
# ProfileStore implementation over GET /users/{user_id}/public-profile using the shared APIClient.
# A private profile never carries a friends list, even if the response included one.
#
# 🔗 Dependencies:
# - app.shared.infrastructure.external_apis.api_client (httpx + tenacity)
# - user_management domain models and ProfileStore
#
# 🔄 Connected Modules / Calls From:
# - FriendsViewLoader when driven from a remote client
# - tests (with httpx.MockTransport)

import logging
from typing import Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from app.modules.user_management.domain.models.profile import PublicProfile
from app.modules.user_management.domain.repositories.profile_repository import ProfileStore
from app.shared.core.exceptions import StoreError
from app.shared.infrastructure.external_apis.api_client import APIClient

logger = logging.getLogger(__name__)


class HttpProfileStore(ProfileStore):
    """ProfileStore backed by the profile HTTP API."""

    def __init__(
        self,
        access_token: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        read_attempts: int = 3,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.api = APIClient(
            "profile",
            access_token=access_token,
            base_url=base_url,
            timeout=timeout,
            read_attempts=read_attempts,
            client=client,
        )

    async def __aenter__(self) -> "HttpProfileStore":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.api.close()

    async def get_public_profile(self, user_id: str) -> PublicProfile:
        data = await self.api.get(f"/users/{user_id}/public-profile", operation="get_public_profile")

        try:
            profile = PublicProfile.model_validate(data)
        except PydanticValidationError as e:
            logger.error(f"Malformed public profile for {user_id}: {e}")
            raise StoreError(
                "Profile API returned a malformed profile",
                operation="get_public_profile",
                store=self.api.api_name,
            ) from e

        return profile.redacted()
