# 📄 File: app/modules/user_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# The user part of the app: public profiles of reviewers and who may see their friends list
# 🧪 Purpose (Technical Summary):
# User management module following the layered layout (domain, infrastructure, presentation)
# 🔗 Dependencies:
# Subpackages of this module
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, review_management (review counts on profiles)

"""
User Management Module

Layers:
- domain: User and PublicProfile entities, ProfileStore contract, friends privacy gate
- infrastructure: SQLAlchemy store and HTTP client store
- presentation: FastAPI endpoints and schemas
"""

__version__ = "1.0.0"
