# 📄 File: app/modules/user_management/domain/models/profile.py
# 🧭 Purpose (Layman Explanation):
# Defines the public profile page data: who the user is, their counters, whether they keep their
# friends list private, and the friends themselves when it is not private
# 🧪 Purpose (Technical Summary):
# Immutable PublicProfile aggregate (user, stats, optional friends). friends is None - not an empty
# list - whenever the list was not loaded, so "private" and "has no friends" stay distinguishable
# 🔗 Dependencies:
# pydantic, typing, user.py
# 🔄 Connected Modules / Calls From:
# ProfileStore implementations, ProfileVisibilityGate, profile API schemas

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .user import User


class ProfileStats(BaseModel):
    """Counters shown on a profile plus the friends-list privacy flag"""
    model_config = ConfigDict(frozen=True)

    friends_private: bool = False
    review_count: int = Field(default=0, ge=0)
    friend_count: int = Field(default=0, ge=0)


class PublicProfile(BaseModel):
    """
    What anyone may request about a user.

    Stores leave friends as None when stats.friends_private is set. The
    visibility gate still checks the flag itself before showing a list.
    """
    model_config = ConfigDict(frozen=True)

    user: User
    stats: ProfileStats = Field(default_factory=ProfileStats)
    friends: Optional[List[User]] = None

    @property
    def friends_private(self) -> bool:
        return self.stats.friends_private

    def redacted(self) -> "PublicProfile":
        """Copy safe to hand to other users: no friends list when it is private"""
        if self.friends_private and self.friends is not None:
            return self.model_copy(update={"friends": None})
        return self
