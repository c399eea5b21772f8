# 📄 File: app/modules/user_management/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the core user data models - who a user is and what their public profile shows
# 🧪 Purpose (Technical Summary):
# Package initialization for user management domain models
# 🔗 Dependencies:
# Domain model classes, pydantic base models
# 🔄 Connected Modules / Calls From:
# Domain services, repositories, infrastructure layer, presentation schemas

"""
User Management Domain Models

Models:
- User: Public identity of a reviewer
- ProfileStats: Profile counters and the friends-list privacy flag
- PublicProfile: User, stats and (when not private) their friends
"""

from .user import User
from .profile import ProfileStats, PublicProfile

__all__ = [
    "User",
    "ProfileStats",
    "PublicProfile",
]
