# 📄 File: app/modules/user_management/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the database pieces for users: the table definitions and the code that reads profiles.
#
# 🧪 Purpose (Technical Summary):
# Database layer for user management: SQLAlchemy models and the ProfileStore implementation.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM models and sessions
#
# 🔄 Connected Modules / Calls From:
# - Profile API dependencies, migrations

from app.modules.user_management.infrastructure.database.models import (
    FriendshipModel,
    FriendshipStatus,
    UserModel,
)
from app.modules.user_management.infrastructure.database.profile_repository_impl import SQLAlchemyProfileStore

__all__ = [
    "UserModel",
    "FriendshipModel",
    "FriendshipStatus",
    "SQLAlchemyProfileStore",
]
