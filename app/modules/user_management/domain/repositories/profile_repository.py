# 📄 File: app/modules/user_management/domain/repositories/profile_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for fetching someone's public profile page data, whether it comes from our own
# database or the profile web API
# 🧪 Purpose (Technical Summary):
# ProfileStore interface following the Repository pattern; implementations must not load the friends
# list of a user whose friends_private flag is set
# 🔗 Dependencies:
# Domain models (PublicProfile), abc
# 🔄 Connected Modules / Calls From:
# FriendsViewLoader, profile API endpoints, SQLAlchemyProfileStore, HttpProfileStore

from abc import ABC, abstractmethod

from ..models.profile import PublicProfile


class ProfileStore(ABC):
    """
    Repository interface for public profile reads.

    Implementation Notes:
    - Methods return domain entities (PublicProfile), not database models or JSON
    - All operations are async for non-blocking I/O
    - When stats.friends_private is set, friends must be None and the
      friends list must not be fetched at all
    """

    @abstractmethod
    async def get_public_profile(self, user_id: str) -> PublicProfile:
        """
        Get a user's public profile.

        Args:
            user_id: User whose profile is requested

        Returns:
            PublicProfile with friends loaded only when not private

        Raises:
            NotFoundError: If the user does not exist
            StoreError: If the store cannot be reached
        """
