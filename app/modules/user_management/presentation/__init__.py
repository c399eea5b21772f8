# 📄 File: app/modules/user_management/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web-facing part of user profiles.
#
# 🧪 Purpose (Technical Summary):
# Presentation layer of user management: FastAPI routers, schemas and dependencies.
#
# 🔗 Dependencies:
# - FastAPI, pydantic
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router
