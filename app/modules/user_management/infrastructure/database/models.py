# 📄 File: app/modules/user_management/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# Defines how users and friendships are stored in the database, including the switch that keeps a
# user's friends list private.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for users and friendships. A friendship links a sender and a receiver and
# counts as a friend relation once accepted, in either direction.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.config.database (declarative base)
#
# 🔄 Connected Modules / Calls From:
# - profile_repository_impl.py (public profile reads)
# - migrations/versions (schema generation)

"""
SQLAlchemy Models for User Management

Models:
- UserModel: Public identity and privacy flag of a reviewer
- FriendshipModel: Friend request between two users (pending or accepted)

String UUID primary keys keep the schema portable between PostgreSQL
and the SQLite database used in tests.
"""

from enum import Enum
from uuid import uuid4

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    Enum as SQLEnum,
    ForeignKey,
    String,
    UniqueConstraint,
    func,
)

from app.shared.config.database import DatabaseBase


class FriendshipStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"


# =============================================================================
# USER MODEL
# =============================================================================

class UserModel(DatabaseBase):
    """
    SQLAlchemy model for users as other reviewers see them.
    """
    __tablename__ = "users"

    user_id = Column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid4()),
        comment="Unique identifier for each user"
    )
    name = Column(
        String(100),
        nullable=False,
        comment="Display name"
    )
    email = Column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
        comment="User's email address"
    )
    username = Column(
        String(50),
        unique=True,
        nullable=True,
        comment="Optional public handle"
    )
    profile_photo_url = Column(
        String(500),
        nullable=True,
        comment="Profile photo URL"
    )

    # Privacy (friends list visibility)
    friends_private = Column(
        Boolean,
        nullable=False,
        default=False,
        comment="Hide the friends list from other users"
    )

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=func.now(),
        comment="Account creation date"
    )

    def __repr__(self) -> str:
        return f"<UserModel(user_id={self.user_id}, name={self.name}, friends_private={self.friends_private})>"


# =============================================================================
# FRIENDSHIP MODEL
# =============================================================================

class FriendshipModel(DatabaseBase):
    """
    SQLAlchemy model for friend requests.

    One row per ordered (sender, receiver) pair; accepted rows are friendships.
    Crossed requests can leave both (A, B) and (B, A); readers treat them as
    one friendship.
    """
    __tablename__ = "friendships"
    __table_args__ = (
        UniqueConstraint("sender_id", "receiver_id", name="uq_friendships_sender_receiver"),
        CheckConstraint("sender_id <> receiver_id", name="not_self"),
    )

    friendship_id = Column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid4()),
        comment="Unique identifier for each friendship"
    )
    sender_id = Column(
        String(36),
        ForeignKey("users.user_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="User who sent the friend request"
    )
    receiver_id = Column(
        String(36),
        ForeignKey("users.user_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="User who received the friend request"
    )
    status = Column(
        SQLEnum(FriendshipStatus, name="friendship_status", native_enum=False, length=16),
        nullable=False,
        default=FriendshipStatus.PENDING,
        comment="pending or accepted"
    )
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=func.now(),
        comment="Request date"
    )

    def __repr__(self) -> str:
        return (
            f"<FriendshipModel(sender_id={self.sender_id}, receiver_id={self.receiver_id}, "
            f"status={self.status})>"
        )
