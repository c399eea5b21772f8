"""Tests for the SQLAlchemy review and profile stores (SQLite in memory)."""

import pytest

from app.modules.review_management.domain.models.review import ReviewDraft, ReviewRating
from app.modules.review_management.infrastructure.database.review_repository_impl import SQLAlchemyReviewStore
from app.modules.user_management.infrastructure.database.models import (
    FriendshipModel,
    FriendshipStatus,
    UserModel,
)
from app.modules.user_management.infrastructure.database.profile_repository_impl import SQLAlchemyProfileStore
from app.shared.core.exceptions import ConflictError, NotFoundError


def _content(rating="LIKE_IT", text="Test review", **attributes):
    return ReviewDraft(rating=rating, text=text, **attributes).validate_content()


class TestSQLAlchemyReviewStore:
    async def test_create_and_lookup(self, db_session):
        store = SQLAlchemyReviewStore(db_session)

        created = await store.create("a1", "s1", _content(size=6))
        found = await store.lookup("a1", "s1")

        assert found is not None
        assert found.id == created.id
        assert found.rating == ReviewRating.LIKE_IT
        assert found.text == "Test review"
        assert found.size == 6
        assert await store.lookup("a1", "s2") is None

    async def test_second_create_for_pair_is_a_conflict(self, db_session):
        store = SQLAlchemyReviewStore(db_session)
        first = await store.create("a1", "s1", _content())
        await db_session.commit()

        with pytest.raises(ConflictError):
            await store.create("a1", "s1", _content(rating="MEH"))

        # The session is usable again and the first review is untouched
        stored = await store.lookup("a1", "s1")
        assert stored.id == first.id
        assert stored.rating == ReviewRating.LIKE_IT

    async def test_update_keeps_id_and_replaces_content(self, db_session):
        store = SQLAlchemyReviewStore(db_session)
        created = await store.create("a1", "s1", _content(creaminess=3))

        updated = await store.update(created.id, _content(rating="LOVE_IT", text=None))

        assert updated.id == created.id
        assert updated.rating == ReviewRating.LOVE_IT
        assert updated.text is None
        assert updated.creaminess is None
        assert len(await store.list_for_subject("s1")) == 1

    async def test_update_missing_review_is_not_found(self, db_session):
        with pytest.raises(NotFoundError):
            await SQLAlchemyReviewStore(db_session).update("missing", _content())

    async def test_lists_by_subject_and_author(self, db_session):
        store = SQLAlchemyReviewStore(db_session)
        await store.create("a1", "s1", _content())
        await store.create("a2", "s1", _content(rating="MEH"))
        await store.create("a1", "s2", _content(rating="WHATEVER"))

        assert {r.author_id for r in await store.list_for_subject("s1")} == {"a1", "a2"}
        assert {r.subject_id for r in await store.list_for_author("a1")} == {"s1", "s2"}
        assert await store.list_for_author("nobody") == []

    async def test_get_by_id(self, db_session):
        store = SQLAlchemyReviewStore(db_session)
        created = await store.create("a1", "s1", _content())

        assert (await store.get_by_id(created.id)).subject_id == "s1"
        assert await store.get_by_id("missing") is None


async def _seed_users(session, friends_private: bool):
    session.add_all([
        UserModel(user_id="u1", name="Test User", email="test@example.com", friends_private=friends_private),
        UserModel(user_id="u2", name="Bob", email="bob@example.com"),
        UserModel(user_id="u3", name="Alice", email="alice@example.com"),
        UserModel(user_id="u4", name="Carol", email="carol@example.com"),
    ])
    await session.flush()
    session.add_all([
        FriendshipModel(sender_id="u1", receiver_id="u2", status=FriendshipStatus.ACCEPTED),
        FriendshipModel(sender_id="u3", receiver_id="u1", status=FriendshipStatus.ACCEPTED),
        FriendshipModel(sender_id="u1", receiver_id="u4", status=FriendshipStatus.PENDING),
    ])
    await session.flush()


class TestSQLAlchemyProfileStore:
    async def test_public_profile_lists_accepted_friends_in_both_directions(self, db_session):
        await _seed_users(db_session, friends_private=False)
        await SQLAlchemyReviewStore(db_session).create("u1", "s1", _content())

        profile = await SQLAlchemyProfileStore(db_session).get_public_profile("u1")

        assert profile.user.name == "Test User"
        assert profile.stats.friends_private is False
        assert profile.stats.friend_count == 2
        assert profile.stats.review_count == 1
        assert [friend.name for friend in profile.friends] == ["Alice", "Bob"]

    async def test_private_profile_has_no_friends_list(self, db_session):
        await _seed_users(db_session, friends_private=True)

        profile = await SQLAlchemyProfileStore(db_session).get_public_profile("u1")

        assert profile.friends_private is True
        assert profile.friends is None
        assert profile.stats.friend_count == 2

    async def test_unknown_user_is_not_found(self, db_session):
        with pytest.raises(NotFoundError):
            await SQLAlchemyProfileStore(db_session).get_public_profile("missing")

    async def test_crossed_requests_count_as_one_friend(self, db_session):
        db_session.add_all([
            UserModel(user_id="u1", name="Test User", email="test@example.com"),
            UserModel(user_id="u2", name="Bob", email="bob@example.com"),
        ])
        await db_session.flush()
        db_session.add_all([
            FriendshipModel(sender_id="u1", receiver_id="u2", status=FriendshipStatus.ACCEPTED),
            FriendshipModel(sender_id="u2", receiver_id="u1", status=FriendshipStatus.ACCEPTED),
        ])
        await db_session.flush()

        profile = await SQLAlchemyProfileStore(db_session).get_public_profile("u1")

        assert [friend.name for friend in profile.friends] == ["Bob"]
        assert profile.stats.friend_count == 1
