# 📄 File: app/modules/review_management/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the contracts for reading and writing reviews
# 🧪 Purpose (Technical Summary):
# Repository interfaces for the review domain
# 🔗 Dependencies:
# review_repository.py
# 🔄 Connected Modules / Calls From:
# Domain services, application flow, infrastructure implementations

from .review_repository import ReviewStore

__all__ = ["ReviewStore"]
