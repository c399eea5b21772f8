# 📄 File: app/modules/review_management/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the review web endpoints and the data formats they use.
#
# 🧪 Purpose (Technical Summary):
# Review API package (versioned routers and schemas).
#
# 🔗 Dependencies:
# - FastAPI
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router
