"""Tests for the friends-list privacy gate and the friends view loader."""

import asyncio

import pytest

from app.modules.user_management.domain.models.profile import ProfileStats, PublicProfile
from app.modules.user_management.domain.models.user import User
from app.modules.user_management.domain.services.profile_visibility import (
    FriendsLoaded,
    FriendsLoadError,
    FriendsNotFound,
    FriendsViewLoader,
    LoadingFriends,
    PrivateFriends,
    ProfileVisibilityGate,
    VisibleFriends,
)
from app.shared.core.exceptions import StoreError


def _user(user_id: str, name: str) -> User:
    return User(id=user_id, name=name, email=f"{user_id}@example.com")


FRIENDS = [_user("f1", "Alice"), _user("f2", "Bob")]


def _profile(private: bool, friends=None) -> PublicProfile:
    return PublicProfile(
        user=_user("u1", "Test User"),
        stats=ProfileStats(friends_private=private, friend_count=2),
        friends=friends,
    )


class TestProfileVisibilityGate:
    def test_private_profile_shows_notice(self):
        outcome = ProfileVisibilityGate().evaluate(_profile(private=True))

        assert outcome.header_name == "Test User's Friends"
        assert outcome.is_private
        assert isinstance(outcome.view, PrivateFriends)
        assert outcome.view.title == "Friends List is Private"
        assert outcome.view.description == "Test User's friends list is set to private."

    def test_private_flag_wins_over_leaked_friends(self):
        outcome = ProfileVisibilityGate().evaluate(_profile(private=True, friends=FRIENDS))

        assert isinstance(outcome.view, PrivateFriends)
        assert not hasattr(outcome.view, "friends")

    def test_public_profile_shows_friends(self):
        outcome = ProfileVisibilityGate().evaluate(_profile(private=False, friends=FRIENDS))

        assert outcome.header_name == "Test User's Friends"
        assert isinstance(outcome.view, VisibleFriends)
        assert [f.name for f in outcome.view.friends] == ["Alice", "Bob"]

    def test_public_profile_without_friends_is_empty_not_private(self):
        outcome = ProfileVisibilityGate().evaluate(_profile(private=False))

        assert isinstance(outcome.view, VisibleFriends)
        assert outcome.view.is_empty

    def test_public_profile_without_friends_list_is_logged(self, caplog):
        with caplog.at_level("WARNING"):
            ProfileVisibilityGate().evaluate(_profile(private=False))

        assert "no friends list" in caplog.text

    def test_public_profile_with_empty_list_is_not_logged(self, caplog):
        with caplog.at_level("WARNING"):
            outcome = ProfileVisibilityGate().evaluate(_profile(private=False, friends=[]))

        assert outcome.view.is_empty
        assert caplog.text == ""

    def test_redacted_profile_drops_private_friends(self):
        assert _profile(private=True, friends=FRIENDS).redacted().friends is None
        assert _profile(private=False, friends=FRIENDS).redacted().friends == FRIENDS


class TestFriendsViewLoader:
    async def test_loading_state_while_fetch_is_pending(self, profile_store):
        profile_store.profiles["u1"] = _profile(private=False, friends=FRIENDS)
        profile_store.hold = asyncio.Event()
        loader = FriendsViewLoader(profile_store)

        pending = asyncio.create_task(loader.load("u1"))
        await asyncio.sleep(0)

        assert isinstance(loader.state, LoadingFriends)
        assert loader.state.label == "Loading friends..."

        profile_store.hold.set()
        state = await pending
        assert isinstance(state, FriendsLoaded)

    async def test_private_profile_loads_as_private(self, profile_store):
        profile_store.profiles["u1"] = _profile(private=True)
        loader = FriendsViewLoader(profile_store)
        seen = []
        loader.subscribe(lambda state: seen.append(state.kind))

        state = await loader.load("u1")

        assert seen == ["loading", "loaded"]
        assert isinstance(state, FriendsLoaded)
        assert state.outcome.header_name == "Test User's Friends"
        assert state.outcome.view.title == "Friends List is Private"

    async def test_unknown_user_is_not_found(self, profile_store):
        state = await FriendsViewLoader(profile_store).load("missing")

        assert isinstance(state, FriendsNotFound)
        assert state.title == "User Not Found"

    async def test_store_failure_is_an_error_not_private(self, profile_store):
        profile_store.failure = StoreError("timeout")

        state = await FriendsViewLoader(profile_store).load("u1")

        assert isinstance(state, FriendsLoadError)
        assert state.message == "Failed to load friends"
        assert isinstance(state.error, StoreError)

    async def test_public_profile_without_friends_list_is_an_error(self, profile_store):
        profile_store.profiles["u1"] = _profile(private=False)

        state = await FriendsViewLoader(profile_store).load("u1")

        assert isinstance(state, FriendsLoadError)
        assert isinstance(state.error, StoreError)
        assert state.message == "Failed to load friends"

    async def test_public_profile_with_no_friends_loads_empty(self, profile_store):
        profile_store.profiles["u1"] = _profile(private=False, friends=[])

        state = await FriendsViewLoader(profile_store).load("u1")

        assert isinstance(state, FriendsLoaded)
        assert state.outcome.view.is_empty

    async def test_unexpected_error_is_reraised(self, profile_store):
        profile_store.failure = RuntimeError("boom")
        loader = FriendsViewLoader(profile_store)

        with pytest.raises(RuntimeError):
            await loader.load("u1")
        assert isinstance(loader.state, FriendsLoadError)

    async def test_stale_response_is_discarded(self, profile_store):
        profile_store.profiles["u1"] = _profile(private=False, friends=FRIENDS)
        first_hold = asyncio.Event()
        profile_store.hold = first_hold
        loader = FriendsViewLoader(profile_store)

        first = asyncio.create_task(loader.load("u1"))
        await asyncio.sleep(0)

        profile_store.hold = None
        latest = await loader.load("u1")
        assert isinstance(latest, FriendsLoaded)

        profile_store.failure = StoreError("late failure")
        first_hold.set()
        await first

        assert loader.state is latest
