# 📄 File: app/modules/user_management/domain/services/profile_visibility.py
# 🧭 Purpose (Layman Explanation):
# Decides what a visitor sees on someone's friends page: the friends, a "this list is private" notice,
# a loading message, or an error - and makes sure a private list is never shown by mistake
# 🧪 Purpose (Technical Summary):
# ProfileVisibilityGate maps a PublicProfile to VisibleFriends | PrivateFriends; FriendsViewLoader wraps
# the ProfileStore fetch in Loading / Loaded / NotFound / LoadError view states with a stale-response guard
# 🔗 Dependencies:
# dataclasses, domain models (PublicProfile, User), ProfileStore, app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# Profile API friends endpoint, remote clients using HttpProfileStore, tests

"""
Friends List Privacy Gate

Private and failed loads are separate variants with separate messages, so a
fetch error can never be rendered as "private" (or the other way round).
"""

import logging
from dataclasses import dataclass
from typing import Callable, ClassVar, List, Optional, Tuple, Union

from app.shared.core.exceptions import NotFoundError, ReviewAppException, StoreError

from ..models.profile import PublicProfile
from ..models.user import User
from ..repositories.profile_repository import ProfileStore

logger = logging.getLogger(__name__)

LOADING_FRIENDS_LABEL = "Loading friends..."
PRIVATE_FRIENDS_TITLE = "Friends List is Private"
USER_NOT_FOUND_TITLE = "User Not Found"
LOAD_FRIENDS_FAILED_MESSAGE = "Failed to load friends"


def friends_header(name: str) -> str:
    return f"{name}'s Friends"


def private_friends_description(name: str) -> str:
    return f"{name}'s friends list is set to private."


# =============================================================================
# GATE OUTCOMES
# =============================================================================

@dataclass(frozen=True)
class VisibleFriends:
    kind: ClassVar[str] = "visible"

    friends: Tuple[User, ...]

    @property
    def is_empty(self) -> bool:
        return not self.friends


@dataclass(frozen=True)
class PrivateFriends:
    kind: ClassVar[str] = "private"

    title: str
    description: str


FriendsView = Union[VisibleFriends, PrivateFriends]


@dataclass(frozen=True)
class FriendsGateOutcome:
    """Heading plus the friends view; the heading is shown in both cases"""
    header_name: str
    view: FriendsView

    @property
    def is_private(self) -> bool:
        return isinstance(self.view, PrivateFriends)


class ProfileVisibilityGate:
    """
    Applies the friends-list privacy setting of a profile.

    Stateless. The privacy flag wins over whatever friends the store
    returned, so a misbehaving store cannot leak a private list.
    """

    def evaluate(self, profile: PublicProfile) -> FriendsGateOutcome:
        name = profile.user.name
        header_name = friends_header(name)

        if profile.friends_private:
            if profile.friends is not None:
                logger.warning(f"Store returned friends for private profile {profile.user.id}; discarding")
            return FriendsGateOutcome(
                header_name=header_name,
                view=PrivateFriends(
                    title=PRIVATE_FRIENDS_TITLE,
                    description=private_friends_description(name),
                ),
            )

        if profile.friends is None:
            logger.warning(f"Store returned no friends list for public profile {profile.user.id}")

        return FriendsGateOutcome(
            header_name=header_name,
            view=VisibleFriends(friends=tuple(profile.friends or ())),
        )


# =============================================================================
# LOADER VIEW STATES
# =============================================================================

@dataclass(frozen=True)
class LoadingFriends:
    kind: ClassVar[str] = "loading"

    user_id: str
    label: str = LOADING_FRIENDS_LABEL


@dataclass(frozen=True)
class FriendsLoaded:
    kind: ClassVar[str] = "loaded"

    user: User
    outcome: FriendsGateOutcome


@dataclass(frozen=True)
class FriendsNotFound:
    kind: ClassVar[str] = "not_found"

    user_id: str
    message: str
    title: str = USER_NOT_FOUND_TITLE


@dataclass(frozen=True)
class FriendsLoadError:
    kind: ClassVar[str] = "error"

    user_id: str
    error: ReviewAppException
    message: str = LOAD_FRIENDS_FAILED_MESSAGE


FriendsViewState = Union[LoadingFriends, FriendsLoaded, FriendsNotFound, FriendsLoadError]


class FriendsViewLoader:
    """
    Loads a user's friends page.

    Every load() first announces LoadingFriends, then exactly one of
    FriendsLoaded / FriendsNotFound / FriendsLoadError. When load() is
    called again before an earlier fetch finished, the earlier result
    is dropped.
    """

    def __init__(self, profile_store: ProfileStore, gate: Optional[ProfileVisibilityGate] = None):
        self.profile_store = profile_store
        self.gate = gate or ProfileVisibilityGate()

        self._state: Optional[FriendsViewState] = None
        self._generation = 0
        self._listeners: List[Callable[[FriendsViewState], None]] = []

    @property
    def state(self) -> Optional[FriendsViewState]:
        return self._state

    def subscribe(self, listener: Callable[[FriendsViewState], None]) -> Callable[[], None]:
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    async def load(self, user_id: str) -> FriendsViewState:
        self._generation += 1
        generation = self._generation
        self._transition(LoadingFriends(user_id=user_id))

        try:
            profile = await self.profile_store.get_public_profile(user_id)
        except NotFoundError as e:
            logger.info(f"Friends page requested for unknown user {user_id}")
            return self._finish(generation, FriendsNotFound(user_id=user_id, message=e.message))
        except ReviewAppException as e:
            logger.warning(f"Failed to load friends of {user_id}: {e.error_code} {e.message}")
            return self._finish(generation, FriendsLoadError(user_id=user_id, error=e))
        except Exception as e:
            error = StoreError(str(e), operation="get_public_profile")
            self._finish(generation, FriendsLoadError(user_id=user_id, error=error))
            raise

        if not profile.friends_private and profile.friends is None:
            # A public profile always carries a list, possibly empty
            error = StoreError(
                "Profile store returned no friends list for a public profile",
                operation="get_public_profile",
                details={"user_id": user_id},
            )
            logger.warning(f"Failed to load friends of {user_id}: {error.message}")
            return self._finish(generation, FriendsLoadError(user_id=user_id, error=error))

        outcome = self.gate.evaluate(profile)
        logger.debug(f"Friends of {user_id} loaded ({outcome.view.kind})")
        return self._finish(generation, FriendsLoaded(user=profile.user, outcome=outcome))

    def _finish(self, generation: int, state: FriendsViewState) -> FriendsViewState:
        if generation != self._generation:
            logger.debug("Discarding stale friends response")
            return self._state
        return self._transition(state)

    def _transition(self, state: FriendsViewState) -> FriendsViewState:
        self._state = state
        for listener in list(self._listeners):
            listener(state)
        return state
