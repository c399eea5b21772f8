# 📄 File: app/modules/review_management/infrastructure/database/review_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Reads and writes oyster reviews in our database, and reports "already reviewed" when the database
# refuses a second review of the same oyster by the same person.
#
# 🧪 Purpose (Technical Summary):
# Concrete ReviewStore using SQLAlchemy async sessions. Maps ReviewModel rows to Review entities,
# IntegrityError on insert to ConflictError and other SQLAlchemy failures to StoreError.
#
# 🔗 Dependencies:
# - app.modules.review_management.domain.repositories.review_repository (interface)
# - app.modules.review_management.infrastructure.database.models (ReviewModel)
# - SQLAlchemy async session and query operations
#
# 🔄 Connected Modules / Calls From:
# - Review API dependencies (per-request store)
# - ReviewFlowController, DuplicateResolver, SubjectRatingService

"""
Review Repository Implementation

Transactions are owned by the caller's session (committed by the session
manager when the request finishes); this store only flushes.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.review_management.domain.models.review import Review, ReviewContent
from app.modules.review_management.domain.repositories.review_repository import ReviewStore
from app.modules.review_management.infrastructure.database.models import ReviewModel
from app.shared.core.exceptions import ConflictError, NotFoundError, StoreError

logger = logging.getLogger(__name__)


class SQLAlchemyReviewStore(ReviewStore):
    """
    SQLAlchemy implementation of the ReviewStore interface.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize the review store.

        Args:
            session: SQLAlchemy async session for database operations
        """
        self._session = session

    async def lookup(self, author_id: str, subject_id: str) -> Optional[Review]:
        try:
            stmt = select(ReviewModel).where(
                ReviewModel.author_id == author_id,
                ReviewModel.subject_id == subject_id,
            )
            result = await self._session.execute(stmt)
            review_model = result.scalar_one_or_none()

            return self._model_to_domain(review_model) if review_model else None

        except SQLAlchemyError as e:
            logger.error(f"Database error looking up review of {subject_id} by {author_id}: {str(e)}")
            raise StoreError(f"Failed to look up review: {str(e)}", operation="lookup", store="database") from e

    async def create(self, author_id: str, subject_id: str, content: ReviewContent) -> Review:
        """
        Insert the first review for (author_id, subject_id).

        Raises:
            ConflictError: If the unique constraint rejects the insert
            StoreError: For other database errors
        """
        review = Review.create_new(author_id, subject_id, content)

        try:
            review_model = self._domain_to_model(review)
            self._session.add(review_model)
            await self._session.flush()

            logger.info(f"Created review {review.id} for subject {subject_id} by {author_id}")
            return self._model_to_domain(review_model)

        except IntegrityError as e:
            await self._session.rollback()
            logger.warning(f"Review creation rejected - {author_id} already reviewed {subject_id}")
            raise ConflictError(
                "A review for this subject by this author already exists",
                details={"author_id": author_id, "subject_id": subject_id},
            ) from e

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error during review creation: {str(e)}")
            raise StoreError(f"Failed to create review: {str(e)}", operation="create", store="database") from e

    async def update(self, review_id: str, content: ReviewContent) -> Review:
        """
        Overwrite the content of an existing review.

        Raises:
            NotFoundError: If the review no longer exists
            StoreError: For other database errors
        """
        try:
            review_model = await self._get_model(review_id)

            if review_model is None:
                raise NotFoundError(f"Review not found: {review_id}", details={"review_id": review_id})

            self._update_model_from_content(review_model, content)
            await self._session.flush()

            logger.info(f"Updated review: {review_id}")
            return self._model_to_domain(review_model)

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error during review update {review_id}: {str(e)}")
            raise StoreError(f"Failed to update review: {str(e)}", operation="update", store="database") from e

    async def get_by_id(self, review_id: str) -> Optional[Review]:
        try:
            review_model = await self._get_model(review_id)
            if review_model:
                return self._model_to_domain(review_model)

            logger.debug(f"Review not found: {review_id}")
            return None

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving review {review_id}: {str(e)}")
            raise StoreError(f"Failed to retrieve review: {str(e)}", operation="get", store="database") from e

    async def list_for_subject(self, subject_id: str) -> List[Review]:
        try:
            stmt = (
                select(ReviewModel)
                .where(ReviewModel.subject_id == subject_id)
                .order_by(ReviewModel.created_at.desc())
            )
            result = await self._session.execute(stmt)
            return [self._model_to_domain(model) for model in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Database error listing reviews for subject {subject_id}: {str(e)}")
            raise StoreError(f"Failed to list reviews: {str(e)}", operation="list", store="database") from e

    async def list_for_author(self, author_id: str) -> List[Review]:
        try:
            stmt = (
                select(ReviewModel)
                .where(ReviewModel.author_id == author_id)
                .order_by(ReviewModel.created_at.desc())
            )
            result = await self._session.execute(stmt)
            return [self._model_to_domain(model) for model in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Database error listing reviews by {author_id}: {str(e)}")
            raise StoreError(f"Failed to list reviews: {str(e)}", operation="list", store="database") from e

    # =========================================================================
    # MAPPING
    # =========================================================================

    async def _get_model(self, review_id: str) -> Optional[ReviewModel]:
        stmt = select(ReviewModel).where(ReviewModel.review_id == review_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _domain_to_model(self, review: Review) -> ReviewModel:
        return ReviewModel(
            review_id=review.id,
            author_id=review.author_id,
            subject_id=review.subject_id,
            rating=review.rating,
            text=review.text,
            size=review.size,
            body=review.body,
            sweet_brininess=review.sweet_brininess,
            flavorfulness=review.flavorfulness,
            creaminess=review.creaminess,
            created_at=review.created_at,
            updated_at=review.updated_at,
        )

    def _update_model_from_content(self, review_model: ReviewModel, content: ReviewContent) -> None:
        review_model.rating = content.rating
        review_model.text = content.text
        for name, value in content.attributes().items():
            setattr(review_model, name, value)
        review_model.updated_at = datetime.now(timezone.utc)

    def _model_to_domain(self, review_model: ReviewModel) -> Review:
        return Review(
            id=review_model.review_id,
            author_id=review_model.author_id,
            subject_id=review_model.subject_id,
            rating=review_model.rating,
            text=review_model.text,
            size=review_model.size,
            body=review_model.body,
            sweet_brininess=review_model.sweet_brininess,
            flavorfulness=review_model.flavorfulness,
            creaminess=review_model.creaminess,
            created_at=review_model.created_at,
            updated_at=review_model.updated_at,
        )
