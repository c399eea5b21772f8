# 📄 File: app/modules/user_management/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# The data formats the profile endpoints return.
#
# 🧪 Purpose (Technical Summary):
# Pydantic response schemas of the profile API.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - profile endpoints, tests

from .profile_schemas import (
    FriendsResponse,
    ProfileStatsResponse,
    PublicProfileResponse,
    UserResponse,
)

__all__ = [
    "UserResponse",
    "ProfileStatsResponse",
    "PublicProfileResponse",
    "FriendsResponse",
]
