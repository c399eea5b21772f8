# 📄 File: app/modules/review_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# The review part of the app: writing a review for an oyster and updating it instead of duplicating it
# 🧪 Purpose (Technical Summary):
# Review management module following the layered layout (domain, application, infrastructure, presentation)
# 🔗 Dependencies:
# Subpackages of this module
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, app.main

"""
Review Management Module

Layers:
- domain: Review entities, ReviewStore contract, duplicate and rating services
- application: the review submission flow (state machine)
- infrastructure: SQLAlchemy store and HTTP client store
- presentation: FastAPI endpoints and schemas
"""

__version__ = "1.0.0"
