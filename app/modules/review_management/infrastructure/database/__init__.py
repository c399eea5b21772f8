# 📄 File: app/modules/review_management/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the database pieces of reviews: the table definition and the code that reads and writes it.
#
# 🧪 Purpose (Technical Summary):
# Database layer for review management: SQLAlchemy model and the ReviewStore implementation.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM models and sessions
#
# 🔄 Connected Modules / Calls From:
# - Review API dependencies, migrations

from app.modules.review_management.infrastructure.database.models import ReviewModel
from app.modules.review_management.infrastructure.database.review_repository_impl import SQLAlchemyReviewStore

__all__ = [
    "ReviewModel",
    "SQLAlchemyReviewStore",
]
