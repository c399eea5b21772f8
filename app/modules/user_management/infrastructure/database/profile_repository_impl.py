# 📄 File: app/modules/user_management/infrastructure/database/profile_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Reads a user's public profile page data from the database: who they are, how many reviews and friends
# they have, and their friends - unless they chose to keep that list private.
#
# 🧪 Purpose (Technical Summary):
# Concrete ProfileStore using SQLAlchemy async sessions. The friends query is skipped entirely for
# users with friends_private set; SQLAlchemy failures surface as StoreError.
#
# 🔗 Dependencies:
# - app.modules.user_management.domain.repositories.profile_repository (interface)
# - app.modules.user_management.infrastructure.database.models (UserModel, FriendshipModel)
# - app.modules.review_management.infrastructure.database.models (review counter)
# - SQLAlchemy async session and query operations
#
# 🔄 Connected Modules / Calls From:
# - Profile API dependencies (per-request store)
# - FriendsViewLoader

"""
Profile Repository Implementation

Friendships are stored once per (sender, receiver); an accepted row makes
each side a friend of the other.
"""

import logging
from typing import List

from sqlalchemy import and_, case, distinct, func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.review_management.infrastructure.database.models import ReviewModel
from app.modules.user_management.domain.models.profile import ProfileStats, PublicProfile
from app.modules.user_management.domain.models.user import User
from app.modules.user_management.domain.repositories.profile_repository import ProfileStore
from app.modules.user_management.infrastructure.database.models import (
    FriendshipModel,
    FriendshipStatus,
    UserModel,
)
from app.shared.core.exceptions import NotFoundError, StoreError

logger = logging.getLogger(__name__)


class SQLAlchemyProfileStore(ProfileStore):
    """
    SQLAlchemy implementation of the ProfileStore interface.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize the profile store.

        Args:
            session: SQLAlchemy async session for database operations
        """
        self._session = session

    async def get_public_profile(self, user_id: str) -> PublicProfile:
        try:
            stmt = select(UserModel).where(UserModel.user_id == user_id)
            result = await self._session.execute(stmt)
            user_model = result.scalar_one_or_none()

            if user_model is None:
                logger.debug(f"User not found: {user_id}")
                raise NotFoundError("User not found", resource_type="user", resource_id=user_id)

            stats = ProfileStats(
                friends_private=bool(user_model.friends_private),
                review_count=await self._count_reviews(user_id),
                friend_count=await self._count_friends(user_id),
            )

            friends = None
            if not stats.friends_private:
                friends = await self._load_friends(user_id)

            logger.debug(f"Retrieved public profile: {user_id} (friends_private={stats.friends_private})")
            return PublicProfile(user=self._model_to_domain(user_model), stats=stats, friends=friends)

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving profile {user_id}: {str(e)}")
            raise StoreError(
                f"Failed to retrieve profile: {str(e)}",
                operation="get_public_profile",
                store="database",
            ) from e

    # =========================================================================
    # QUERIES
    # =========================================================================

    def _accepted_friendships_of(self, user_id: str):
        return and_(
            FriendshipModel.status == FriendshipStatus.ACCEPTED,
            or_(FriendshipModel.sender_id == user_id, FriendshipModel.receiver_id == user_id),
        )

    async def _count_reviews(self, user_id: str) -> int:
        stmt = select(func.count(ReviewModel.review_id)).where(ReviewModel.author_id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def _count_friends(self, user_id: str) -> int:
        # Reversed rows (A,B) and (B,A) are one friend
        friend_id = case(
            (FriendshipModel.sender_id == user_id, FriendshipModel.receiver_id),
            else_=FriendshipModel.sender_id,
        )
        stmt = select(func.count(distinct(friend_id))).where(self._accepted_friendships_of(user_id))
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def _load_friends(self, user_id: str) -> List[User]:
        stmt = (
            select(UserModel)
            .join(
                FriendshipModel,
                or_(
                    and_(FriendshipModel.sender_id == user_id, FriendshipModel.receiver_id == UserModel.user_id),
                    and_(FriendshipModel.receiver_id == user_id, FriendshipModel.sender_id == UserModel.user_id),
                ),
            )
            .where(FriendshipModel.status == FriendshipStatus.ACCEPTED)
            .distinct()
            .order_by(UserModel.name)
        )
        result = await self._session.execute(stmt)
        return [self._model_to_domain(model) for model in result.scalars().all()]

    def _model_to_domain(self, user_model: UserModel) -> User:
        return User(
            id=user_model.user_id,
            name=user_model.name,
            email=user_model.email,
            username=user_model.username,
            profile_photo_url=user_model.profile_photo_url,
        )
