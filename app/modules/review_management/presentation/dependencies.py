# 📄 File: app/modules/review_management/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Hands each review request the tools it needs: a connection to the review database and the
# services that find duplicates and compute scores.
# 🧪 Purpose (Technical Summary):
# Module-specific FastAPI dependencies wiring per-request SQLAlchemy sessions into ReviewStore,
# DuplicateResolver and SubjectRatingService, plus the shared slowapi limiter for write endpoints.
# 🔗 Dependencies:
# FastAPI, slowapi, app.shared.infrastructure.database.session, review_management infrastructure
# 🔄 Connected Modules / Calls From:
# app.modules.review_management.presentation.api.v1.reviews, app.main (limiter registration)

import logging

from fastapi import Depends
from slowapi import Limiter
from slowapi.util import get_remote_address
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.review_management.domain.repositories.review_repository import ReviewStore
from app.modules.review_management.domain.services.duplicate_resolver import DuplicateResolver
from app.modules.review_management.domain.services.rating_service import SubjectRatingService
from app.modules.review_management.infrastructure.database.review_repository_impl import SQLAlchemyReviewStore
from app.shared.config.settings import get_settings
from app.shared.infrastructure.database.session import get_db_session

logger = logging.getLogger(__name__)

# Rate limiting configuration
limiter = Limiter(key_func=get_remote_address, enabled=get_settings().RATE_LIMIT_ENABLED)


def get_review_store(session: AsyncSession = Depends(get_db_session)) -> ReviewStore:
    """Review store bound to the request's database session."""
    return SQLAlchemyReviewStore(session)


def get_duplicate_resolver(review_store: ReviewStore = Depends(get_review_store)) -> DuplicateResolver:
    return DuplicateResolver(review_store)


def get_rating_service(review_store: ReviewStore = Depends(get_review_store)) -> SubjectRatingService:
    return SubjectRatingService(review_store)
