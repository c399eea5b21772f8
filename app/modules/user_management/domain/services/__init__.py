# 📄 File: app/modules/user_management/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the business rules for what visitors may see on someone's profile
# 🧪 Purpose (Technical Summary):
# Package initialization for user management domain services
# 🔗 Dependencies:
# profile_visibility
# 🔄 Connected Modules / Calls From:
# Profile API endpoints, remote clients

from .profile_visibility import (
    FriendsGateOutcome,
    FriendsLoaded,
    FriendsLoadError,
    FriendsNotFound,
    FriendsViewLoader,
    FriendsViewState,
    LoadingFriends,
    PrivateFriends,
    ProfileVisibilityGate,
    VisibleFriends,
)

__all__ = [
    "ProfileVisibilityGate",
    "FriendsGateOutcome",
    "VisibleFriends",
    "PrivateFriends",
    "FriendsViewLoader",
    "FriendsViewState",
    "LoadingFriends",
    "FriendsLoaded",
    "FriendsNotFound",
    "FriendsLoadError",
]
