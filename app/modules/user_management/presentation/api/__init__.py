# 📄 File: app/modules/user_management/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the profile web endpoints and the data formats they use.
#
# 🧪 Purpose (Technical Summary):
# Profile API package (versioned routers and schemas).
#
# 🔗 Dependencies:
# - FastAPI
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router
