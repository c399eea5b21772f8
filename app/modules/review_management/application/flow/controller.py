# 📄 File: app/modules/review_management/application/flow/controller.py
# 🧭 Purpose (Layman Explanation):
# Runs the "write a review" screen: checks the form, looks for an earlier review of the same oyster,
# asks before overwriting it, saves, and keeps the user's text safe when something goes wrong
# 🧪 Purpose (Technical Summary):
# ReviewFlowController state machine orchestrating validation, DuplicateResolver lookup and ReviewStore
# create/update. One request in flight per flow; responses to cancelled requests are discarded
# 🔗 Dependencies:
# flow states, DuplicateResolver, ReviewStore, app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# Review API submit endpoint, remote clients using HttpReviewStore, tests

"""
Review Submission Flow

    Composing --submit--> Submitting --no prior review--> Persisted(created)
                              |
                              +--prior review--> DuplicateDetected
                                                      |
                                             resolve_as_update()
                                                      v
                                                  Resolving --confirm_update--> Persisted(updated)

Any store failure moves to Failed, which keeps the draft and can be retried.
Validation errors never leave the controller: the flow stays in Composing
(or Resolving) with the error attached and no store is contacted.
"""

import logging
from typing import Callable, List, Optional

from app.shared.core.exceptions import (
    FlowBusyError,
    InvalidTransitionError,
    ReviewAppException,
    StoreError,
    ValidationError,
    is_retryable,
)

from ...domain.models.review import DEFAULT_TEXT_MAX_LENGTH, Review, ReviewDraft
from ...domain.repositories.review_repository import ReviewStore
from ...domain.services.duplicate_resolver import DuplicateResolver
from .states import (
    Composing,
    DuplicateDetected,
    Failed,
    FailedDuring,
    FlowState,
    PersistOutcome,
    Persisted,
    Resolving,
    Submitting,
    flow_label,
    is_busy,
    submit_label,
)

logger = logging.getLogger(__name__)

StateListener = Callable[[FlowState], None]


class ReviewFlowController:
    """
    State machine for one author reviewing one subject.

    A controller instance serves a single flow (one form on one screen).
    Transitions are announced to subscribed listeners so a presentation
    layer can render each state without knowing about persistence.
    """

    def __init__(
        self,
        author_id: str,
        subject_id: str,
        review_store: ReviewStore,
        duplicate_resolver: Optional[DuplicateResolver] = None,
        max_text_length: int = DEFAULT_TEXT_MAX_LENGTH,
        draft: Optional[ReviewDraft] = None,
    ):
        self.author_id = author_id
        self.subject_id = subject_id
        self.review_store = review_store
        self.duplicate_resolver = duplicate_resolver or DuplicateResolver(review_store)
        self.max_text_length = max_text_length

        self._state: FlowState = Composing(draft=draft or ReviewDraft())
        self._generation = 0
        self._listeners: List[StateListener] = []

    @classmethod
    def for_existing(
        cls,
        review: Review,
        review_store: ReviewStore,
        max_text_length: int = DEFAULT_TEXT_MAX_LENGTH,
    ) -> "ReviewFlowController":
        """
        Start a flow that edits a review the author already chose to update
        (e.g. from their list of reviews), skipping the duplicate prompt.
        """
        controller = cls(review.author_id, review.subject_id, review_store, max_text_length=max_text_length)
        controller._state = Resolving(draft=review.to_draft(), existing=review)
        return controller

    # =========================================================================
    # STATE ACCESS
    # =========================================================================

    @property
    def state(self) -> FlowState:
        return self._state

    @property
    def draft(self) -> Optional[ReviewDraft]:
        return getattr(self._state, "draft", None)

    @property
    def label(self) -> str:
        return flow_label(self._state)

    @property
    def submit_label(self) -> str:
        return submit_label(self._state)

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener called on every transition. Returns an unsubscribe callable."""
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    # =========================================================================
    # ACTIONS
    # =========================================================================

    def edit(self, draft: ReviewDraft) -> FlowState:
        """
        Replace the working draft.

        Allowed while composing, while resolving (not mid-request), after a
        failure, and after an update was persisted (to edit it again).
        """
        state = self._state

        if isinstance(state, Composing):
            return self._transition(Composing(draft=draft))
        if isinstance(state, Resolving) and not state.pending:
            return self._transition(Resolving(draft=draft, existing=state.existing))
        if isinstance(state, Persisted) and state.outcome == PersistOutcome.UPDATED:
            return self._transition(Resolving(draft=draft, existing=state.review))
        if isinstance(state, Failed):
            if state.existing is not None and state.during == FailedDuring.UPDATE:
                return self._transition(Resolving(draft=draft, existing=state.existing))
            return self._transition(Composing(draft=draft))

        raise InvalidTransitionError("edit the draft", state.name)

    async def submit(self, draft: Optional[ReviewDraft] = None) -> FlowState:
        """
        Submit a draft: validate, check for a prior review, then create.

        Returns:
            The resulting state: Composing (validation error), DuplicateDetected,
            Persisted(created) or Failed

        Raises:
            FlowBusyError: If a request of this flow is still outstanding
            InvalidTransitionError: If the flow is waiting on a duplicate decision
        """
        state = self._state
        self._ensure_idle("submit")

        if not isinstance(state, (Composing, Failed, Persisted)):
            raise InvalidTransitionError("submit", state.name)

        if draft is None:
            draft = state.review.to_draft() if isinstance(state, Persisted) else state.draft

        try:
            content = draft.validate_content(self.max_text_length)
        except ValidationError as e:
            logger.info(f"Review draft rejected for subject {self.subject_id}: {e.message}")
            return self._transition(Composing(draft=draft, error=e))

        generation = self._start(Submitting(draft=draft))

        try:
            existing = await self.duplicate_resolver.check(self.author_id, self.subject_id)
        except ReviewAppException as e:
            return self._fail_if_current(generation, e, draft, FailedDuring.SUBMIT)
        except Exception as e:
            self._fail_if_current(generation, StoreError(str(e), operation="lookup"), draft, FailedDuring.SUBMIT)
            raise

        if self._is_stale(generation):
            return self._state

        if existing is not None:
            return self._transition(DuplicateDetected(draft=draft, existing=existing))

        try:
            review = await self.review_store.create(self.author_id, self.subject_id, content)
        except ReviewAppException as e:
            return self._fail_if_current(generation, e, draft, FailedDuring.SUBMIT)
        except Exception as e:
            self._fail_if_current(generation, StoreError(str(e), operation="create"), draft, FailedDuring.SUBMIT)
            raise

        if self._is_stale(generation):
            return self._state

        logger.info(f"Review {review.id} created by {self.author_id} for subject {self.subject_id}")
        return self._transition(Persisted(review=review, outcome=PersistOutcome.CREATED))

    def resolve_as_update(self) -> FlowState:
        """
        Accept the offer to update the earlier review.

        The draft is pre-populated from the existing review so the user edits
        their previous text and rating rather than starting blank. Nothing is
        written until confirm_update().

        Raises:
            InvalidTransitionError: Unless a duplicate was detected
        """
        state = self._state
        if not isinstance(state, DuplicateDetected):
            raise InvalidTransitionError("resolve as update", state.name)

        return self._transition(Resolving(draft=state.existing.to_draft(), existing=state.existing))

    async def confirm_update(self, draft: Optional[ReviewDraft] = None) -> FlowState:
        """
        Write the edited draft over the existing review (same review id).

        Also accepted right after a persisted update, so confirming the same
        draft again leaves the stored review unchanged apart from updated_at.

        Raises:
            FlowBusyError: If a request of this flow is still outstanding
            InvalidTransitionError: If there is no existing review to update
        """
        state = self._state
        self._ensure_idle("confirm update")

        if isinstance(state, Resolving):
            existing = state.existing
            draft = draft or state.draft
        elif isinstance(state, Persisted) and state.outcome == PersistOutcome.UPDATED:
            existing = state.review
            draft = draft or state.review.to_draft()
        else:
            raise InvalidTransitionError("confirm update", state.name)

        try:
            content = draft.validate_content(self.max_text_length)
        except ValidationError as e:
            logger.info(f"Review update draft rejected for review {existing.id}: {e.message}")
            return self._transition(Resolving(draft=draft, existing=existing, error=e))

        generation = self._start(Resolving(draft=draft, existing=existing, pending=True))

        try:
            review = await self.review_store.update(existing.id, content)
        except ReviewAppException as e:
            return self._fail_if_current(generation, e, draft, FailedDuring.UPDATE, existing)
        except Exception as e:
            self._fail_if_current(
                generation, StoreError(str(e), operation="update"), draft, FailedDuring.UPDATE, existing
            )
            raise

        if self._is_stale(generation):
            return self._state

        logger.info(f"Review {review.id} updated by {self.author_id}")
        return self._transition(Persisted(review=review, outcome=PersistOutcome.UPDATED))

    async def retry(self) -> FlowState:
        """
        Repeat the failed request with the preserved draft.

        A failed update is retried as an update; a failed submit is
        re-submitted, which re-runs the duplicate check (so a conflict from
        a concurrent create turns into DuplicateDetected).

        Raises:
            InvalidTransitionError: Unless the flow failed with a retryable error
        """
        state = self._state
        if not isinstance(state, Failed) or not state.retryable:
            raise InvalidTransitionError("retry", state.name)

        if state.during == FailedDuring.UPDATE and state.existing is not None:
            self._transition(Resolving(draft=state.draft, existing=state.existing))
            return await self.confirm_update(state.draft)

        self._transition(Composing(draft=state.draft))
        return await self.submit(state.draft)

    def cancel(self) -> FlowState:
        """
        Supersede any outstanding request.

        A response that arrives afterwards is discarded. The flow goes back
        to editing the same draft.
        """
        self._generation += 1
        state = self._state

        if isinstance(state, Submitting):
            logger.debug(f"Submission for subject {self.subject_id} cancelled")
            return self._transition(Composing(draft=state.draft))
        if isinstance(state, Resolving) and state.pending:
            logger.debug(f"Update of review {state.existing.id} cancelled")
            return self._transition(Resolving(draft=state.draft, existing=state.existing))
        return state

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _ensure_idle(self, action: str) -> None:
        if is_busy(self._state):
            logger.warning(f"Rejected re-entrant {action} for subject {self.subject_id}")
            raise FlowBusyError(state=self._state.name)

    def _start(self, state: FlowState) -> int:
        self._generation += 1
        self._transition(state)
        return self._generation

    def _is_stale(self, generation: int) -> bool:
        if generation != self._generation:
            logger.debug(f"Discarding stale response for subject {self.subject_id}")
            return True
        return False

    def _fail_if_current(
        self,
        generation: int,
        error: ReviewAppException,
        draft: ReviewDraft,
        during: FailedDuring,
        existing: Optional[Review] = None,
    ) -> FlowState:
        if self._is_stale(generation):
            return self._state

        logger.warning(
            f"Review {during.value} failed for author {self.author_id} on subject {self.subject_id}: "
            f"{error.error_code} {error.message}"
        )
        return self._transition(Failed(
            error=error,
            draft=draft,
            during=during,
            retryable=is_retryable(error),
            existing=existing,
        ))

    def _transition(self, state: FlowState) -> FlowState:
        self._state = state
        for listener in list(self._listeners):
            listener(state)
        return state
