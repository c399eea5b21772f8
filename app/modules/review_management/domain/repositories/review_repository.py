# 📄 File: app/modules/review_management/domain/repositories/review_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for how oyster reviews are found, saved and changed, whether they live in our
# own database or behind the review web API
# 🧪 Purpose (Technical Summary):
# ReviewStore interface following the Repository pattern; the storage layer is the authoritative guard of
# the one-review-per-(author, subject) invariant
# 🔗 Dependencies:
# Domain models (Review, ReviewContent), typing, abc
# 🔄 Connected Modules / Calls From:
# DuplicateResolver, ReviewFlowController, SQLAlchemyReviewStore, HttpReviewStore, review API endpoints

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.review import Review, ReviewContent


class ReviewStore(ABC):
    """
    Repository interface for Review persistence.

    Implementation Notes:
    - Methods return domain entities (Review), not database models or JSON
    - All operations are async for non-blocking I/O
    - create() must enforce uniqueness of (author_id, subject_id) itself;
      a lookup() beforehand is advisory and may race with another session
    - Transport and storage failures are raised as StoreError
    """

    @abstractmethod
    async def lookup(self, author_id: str, subject_id: str) -> Optional[Review]:
        """
        Find the review an author wrote for a subject.

        Returns:
            Review if present, None otherwise

        Raises:
            StoreError: If the store cannot be reached
        """

    @abstractmethod
    async def create(self, author_id: str, subject_id: str, content: ReviewContent) -> Review:
        """
        Create the first review for a pair.

        Raises:
            ConflictError: If a review already exists for (author_id, subject_id)
            StoreError: For other storage failures
        """

    @abstractmethod
    async def update(self, review_id: str, content: ReviewContent) -> Review:
        """
        Replace the content of an existing review, keeping its id.

        Raises:
            NotFoundError: If the review no longer exists
            StoreError: For other storage failures
        """

    @abstractmethod
    async def get_by_id(self, review_id: str) -> Optional[Review]:
        """
        Get review by ID.

        Returns:
            Review if found, None otherwise
        """

    @abstractmethod
    async def list_for_subject(self, subject_id: str) -> List[Review]:
        """Reviews of a subject, newest first. Empty list when none."""

    @abstractmethod
    async def list_for_author(self, author_id: str) -> List[Review]:
        """Reviews written by an author, newest first. Empty list when none."""
