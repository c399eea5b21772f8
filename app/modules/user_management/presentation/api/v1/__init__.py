# 📄 File: app/modules/user_management/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 of the profile endpoints.
#
# 🧪 Purpose (Technical Summary):
# Exposes the v1 public profile router.
#
# 🔗 Dependencies:
# - FastAPI APIRouter
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router

from .profiles import profiles_router

__all__ = ["profiles_router"]
