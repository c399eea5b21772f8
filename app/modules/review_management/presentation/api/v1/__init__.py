# 📄 File: app/modules/review_management/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 of the review endpoints.
#
# 🧪 Purpose (Technical Summary):
# Exposes the v1 reviews router.
#
# 🔗 Dependencies:
# - FastAPI router
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router

from .reviews import reviews_router

__all__ = ["reviews_router"]
