# 📄 File: app/modules/user_management/presentation/api/schemas/profile_schemas.py
# 🧭 Purpose (Layman Explanation):
# Describes what the profile endpoints return: a user's public card, their counters, and their friends
# page - either the list or the "this list is private" notice.
#
# 🧪 Purpose (Technical Summary):
# Pydantic response schemas for public profiles and the friends gate outcome. The friends field is null
# for private profiles and is never filled from a private profile's data.
#
# 🔗 Dependencies:
# - pydantic for schema validation and serialization
# - user_management domain models and visibility gate outcomes
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation.api.v1.profiles
# - HttpProfileStore (parses PublicProfileResponse JSON)

"""
Profile API Schemas

Response Schemas:
- UserResponse: Public identity of a user
- ProfileStatsResponse: Counters and the friends privacy flag
- PublicProfileResponse: User, stats and friends (null when private)
- FriendsResponse: Friends page, "visible" or "private"
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.modules.user_management.domain.models.profile import ProfileStats, PublicProfile
from app.modules.user_management.domain.models.user import User
from app.modules.user_management.domain.services.profile_visibility import (
    FriendsGateOutcome,
    PrivateFriends,
)


class UserResponse(BaseModel):
    """Public identity of a user."""

    id: str
    name: str
    email: str
    username: Optional[str] = None
    profile_photo_url: Optional[str] = None

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            username=user.username,
            profile_photo_url=user.profile_photo_url,
        )


class ProfileStatsResponse(BaseModel):
    friends_private: bool
    review_count: int
    friend_count: int

    @classmethod
    def from_domain(cls, stats: ProfileStats) -> "ProfileStatsResponse":
        return cls(
            friends_private=stats.friends_private,
            review_count=stats.review_count,
            friend_count=stats.friend_count,
        )


class PublicProfileResponse(BaseModel):
    """
    Public profile of a user.

    friends is null when the user keeps their friends list private.
    """

    user: UserResponse
    stats: ProfileStatsResponse
    friends: Optional[List[UserResponse]] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "user": {"id": "a1b2", "name": "Test User", "email": "test@example.com", "username": "testuser"},
                "stats": {"friends_private": True, "review_count": 12, "friend_count": 4},
                "friends": None,
            }
        }
    )

    @classmethod
    def from_domain(cls, profile: PublicProfile) -> "PublicProfileResponse":
        profile = profile.redacted()
        return cls(
            user=UserResponse.from_domain(profile.user),
            stats=ProfileStatsResponse.from_domain(profile.stats),
            friends=[UserResponse.from_domain(friend) for friend in profile.friends]
            if profile.friends is not None else None,
        )


class FriendsResponse(BaseModel):
    """
    Friends page of a user.

    state "visible" carries friends; state "private" carries the notice
    (title and description) and no friends.
    """

    state: str = Field(..., description='"visible" or "private"')
    header_name: str = Field(..., examples=["Test User's Friends"])
    friends: Optional[List[UserResponse]] = None
    title: Optional[str] = Field(default=None, examples=["Friends List is Private"])
    description: Optional[str] = Field(default=None, examples=["Test User's friends list is set to private."])

    @classmethod
    def from_outcome(cls, outcome: FriendsGateOutcome) -> "FriendsResponse":
        view = outcome.view
        if isinstance(view, PrivateFriends):
            return cls(
                state=view.kind,
                header_name=outcome.header_name,
                title=view.title,
                description=view.description,
            )

        return cls(
            state=view.kind,
            header_name=outcome.header_name,
            friends=[UserResponse.from_domain(friend) for friend in view.friends],
        )
