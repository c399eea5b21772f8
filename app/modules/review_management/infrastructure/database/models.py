# 📄 File: app/modules/review_management/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# Defines the table where oyster reviews are kept, and makes the database itself refuse a second
# review of the same oyster by the same person.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for Review entities with a unique (author_id, subject_id) constraint,
# the authoritative guard behind the create-vs-update decision of the review flow.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.config.database (declarative base)
#
# 🔄 Connected Modules / Calls From:
# - review_repository_impl.py (CRUD operations)
# - migrations/versions (schema generation)

"""
SQLAlchemy Models for Review Management

Models:
- ReviewModel: One author's review of one subject (oyster)

String UUID primary keys keep the schema portable between PostgreSQL
and the SQLite database used in tests.
"""

from uuid import uuid4

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    Enum as SQLEnum,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
)

from app.shared.config.database import DatabaseBase
from app.modules.review_management.domain.models.review import ReviewRating


def _attribute_column(name: str) -> Column:
    return Column(
        Integer,
        CheckConstraint(f"{name} BETWEEN 1 AND 10", name=f"{name}_range"),
        nullable=True,
        comment=f"Tasting attribute {name} (1-10)",
    )


# =============================================================================
# REVIEW MODEL
# =============================================================================

class ReviewModel(DatabaseBase):
    """
    SQLAlchemy model for oyster reviews.

    At most one row per (author_id, subject_id); later submissions for the
    pair update this row in place.
    """
    __tablename__ = "reviews"
    __table_args__ = (
        UniqueConstraint("author_id", "subject_id", name="uq_reviews_author_subject"),
    )

    review_id = Column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid4()),
        comment="Unique identifier for each review"
    )
    author_id = Column(
        String(36),
        nullable=False,
        index=True,
        comment="User who wrote the review"
    )
    subject_id = Column(
        String(36),
        nullable=False,
        index=True,
        comment="Oyster being reviewed"
    )

    rating = Column(
        SQLEnum(ReviewRating, name="review_rating", native_enum=False, length=16),
        nullable=False,
        comment="Reviewer's reaction"
    )
    text = Column(
        Text,
        nullable=True,
        comment="Optional tasting notes (trimmed)"
    )

    size = _attribute_column("size")
    body = _attribute_column("body")
    sweet_brininess = _attribute_column("sweet_brininess")
    flavorfulness = _attribute_column("flavorfulness")
    creaminess = _attribute_column("creaminess")

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=func.now(),
        comment="Review creation date"
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=func.now(),
        comment="Last content change"
    )

    def __repr__(self) -> str:
        return (
            f"<ReviewModel(review_id={self.review_id}, author_id={self.author_id}, "
            f"subject_id={self.subject_id}, rating={self.rating})>"
        )
