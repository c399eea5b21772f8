"""Shared fixtures: test settings, in-memory fake stores and a SQLite database."""

import asyncio
import os
from typing import Dict, List, Optional

# Settings are cached on first use; configure the environment before any app import
os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["LOG_FORMAT"] = "text"
os.environ["JWT_SECRET_KEY"] = "test-secret-key-that-is-at-least-32-characters"

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.modules.review_management.domain.models.review import Review, ReviewContent  # noqa: E402
from app.modules.review_management.domain.repositories.review_repository import ReviewStore  # noqa: E402
from app.modules.review_management.infrastructure.database import models as review_models  # noqa: E402,F401
from app.modules.user_management.domain.models.profile import PublicProfile  # noqa: E402
from app.modules.user_management.domain.repositories.profile_repository import ProfileStore  # noqa: E402
from app.modules.user_management.infrastructure.database import models as user_models  # noqa: E402,F401
from app.shared.config.database import DatabaseBase  # noqa: E402
from app.shared.core.exceptions import ConflictError, NotFoundError  # noqa: E402


class FakeReviewStore(ReviewStore):
    """
    In-memory ReviewStore.

    failures: operation name -> exception raised by the next call of that operation.
    hold: when set, lookup/create/update wait on this event before answering.
    """

    def __init__(self, reviews: Optional[List[Review]] = None):
        self.reviews: Dict[str, Review] = {review.id: review for review in reviews or []}
        self.calls: List[str] = []
        self.failures: Dict[str, Exception] = {}
        self.hold: Optional[asyncio.Event] = None

    async def _enter(self, operation: str) -> None:
        self.calls.append(operation)
        if self.hold is not None:
            await self.hold.wait()
        if operation in self.failures:
            raise self.failures.pop(operation)

    def count(self, operation: str) -> int:
        return self.calls.count(operation)

    async def lookup(self, author_id: str, subject_id: str) -> Optional[Review]:
        await self._enter("lookup")
        for review in self.reviews.values():
            if review.author_id == author_id and review.subject_id == subject_id:
                return review
        return None

    async def create(self, author_id: str, subject_id: str, content: ReviewContent) -> Review:
        await self._enter("create")
        for review in self.reviews.values():
            if review.author_id == author_id and review.subject_id == subject_id:
                raise ConflictError("A review for this subject by this author already exists")
        review = Review.create_new(author_id, subject_id, content)
        self.reviews[review.id] = review
        return review

    async def update(self, review_id: str, content: ReviewContent) -> Review:
        await self._enter("update")
        if review_id not in self.reviews:
            raise NotFoundError(f"Review not found: {review_id}")
        review = self.reviews[review_id].with_content(content)
        self.reviews[review_id] = review
        return review

    async def get_by_id(self, review_id: str) -> Optional[Review]:
        self.calls.append("get_by_id")
        return self.reviews.get(review_id)

    async def list_for_subject(self, subject_id: str) -> List[Review]:
        self.calls.append("list_for_subject")
        reviews = [r for r in self.reviews.values() if r.subject_id == subject_id]
        return sorted(reviews, key=lambda r: r.created_at, reverse=True)

    async def list_for_author(self, author_id: str) -> List[Review]:
        self.calls.append("list_for_author")
        reviews = [r for r in self.reviews.values() if r.author_id == author_id]
        return sorted(reviews, key=lambda r: r.created_at, reverse=True)


class FakeProfileStore(ProfileStore):
    """In-memory ProfileStore with the same failure/hold hooks as FakeReviewStore."""

    def __init__(self, profiles: Optional[List[PublicProfile]] = None):
        self.profiles: Dict[str, PublicProfile] = {p.user.id: p for p in profiles or []}
        self.failure: Optional[Exception] = None
        self.hold: Optional[asyncio.Event] = None
        self.calls = 0

    async def get_public_profile(self, user_id: str) -> PublicProfile:
        self.calls += 1
        if self.hold is not None:
            await self.hold.wait()
        if self.failure is not None:
            raise self.failure
        if user_id not in self.profiles:
            raise NotFoundError("User not found", resource_type="user", resource_id=user_id)
        return self.profiles[user_id]


@pytest.fixture
def review_store():
    return FakeReviewStore()


@pytest.fixture
def profile_store():
    return FakeProfileStore()


@pytest.fixture
async def db_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(DatabaseBase.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session
