# 📄 File: app/modules/review_management/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web-facing part of reviews: the addresses apps call to submit and read reviews.
#
# 🧪 Purpose (Technical Summary):
# Presentation layer of review management: FastAPI routers, schemas and dependencies.
#
# 🔗 Dependencies:
# - FastAPI, pydantic, slowapi
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router
