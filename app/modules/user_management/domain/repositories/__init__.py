# 📄 File: app/modules/user_management/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Lists the ways profile data can be fetched, without saying where it is stored
# 🧪 Purpose (Technical Summary):
# Repository interfaces of the user management domain
# 🔗 Dependencies:
# profile_repository
# 🔄 Connected Modules / Calls From:
# Domain services, infrastructure implementations

from .profile_repository import ProfileStore

__all__ = ["ProfileStore"]
