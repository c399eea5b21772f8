# 📄 File: app/modules/user_management/presentation/api/v1/profiles.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints for looking at another reviewer: their public profile card and their friends page,
# which shows "Friends List is Private" instead of the list when they chose privacy.
#
# 🧪 Purpose (Technical Summary):
# FastAPI public profile endpoints. The friends endpoint runs FriendsViewLoader and renders the gate
# outcome; unknown users are 404 and store failures 503, never a "private" answer.
#
# 🔗 Dependencies:
# - FastAPI router
# - user_management domain services, presentation schemas and dependencies
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /users)
# - HttpProfileStore (remote clients)

"""
Profiles API Endpoints

Endpoints:
- GET /{user_id}/public-profile: User, stats and friends (null when private)
- GET /{user_id}/friends: Friends page, visible or private

Both endpoints are public; privacy is applied to every caller alike.
"""

import logging

from fastapi import APIRouter, Depends

from app.modules.user_management.domain.repositories.profile_repository import ProfileStore
from app.modules.user_management.domain.services.profile_visibility import (
    FriendsLoadError,
    FriendsNotFound,
    FriendsViewLoader,
)
from app.modules.user_management.presentation.api.schemas.profile_schemas import (
    FriendsResponse,
    PublicProfileResponse,
)
from app.modules.user_management.presentation.dependencies import (
    get_friends_view_loader,
    get_profile_store,
)
from app.shared.core.exceptions import NotFoundError

logger = logging.getLogger(__name__)

# Create router
profiles_router = APIRouter()


@profiles_router.get(
    "/{user_id}/public-profile",
    response_model=PublicProfileResponse,
    summary="Get a public profile",
    description="User info and stats; the friends list is omitted (null) when it is private",
    responses={404: {"description": "User not found"}},
)
async def get_public_profile(
    user_id: str,
    profile_store: ProfileStore = Depends(get_profile_store),
) -> PublicProfileResponse:
    profile = await profile_store.get_public_profile(user_id)
    return PublicProfileResponse.from_domain(profile)


@profiles_router.get(
    "/{user_id}/friends",
    response_model=FriendsResponse,
    summary="Get a user's friends page",
    description="Friends of a user, or the private-list notice when the user hides them",
    responses={
        404: {"description": "User not found"},
        503: {"description": "Friends could not be loaded"},
    },
)
async def get_friends(
    user_id: str,
    loader: FriendsViewLoader = Depends(get_friends_view_loader),
) -> FriendsResponse:
    state = await loader.load(user_id)

    if isinstance(state, FriendsNotFound):
        raise NotFoundError(state.message, resource_type="user", resource_id=user_id)
    if isinstance(state, FriendsLoadError):
        raise state.error

    return FriendsResponse.from_outcome(state.outcome)
