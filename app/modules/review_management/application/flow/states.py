# 📄 File: app/modules/review_management/application/flow/states.py
# 🧭 Purpose (Layman Explanation):
# Lists every screen state of writing a review - composing, sending, "you already reviewed this",
# editing the old review, saved, and failed - with exactly the data each one needs
# 🧪 Purpose (Technical Summary):
# Closed set of immutable review-flow states (tagged variants). Each state carries only its own payload,
# so e.g. an update can never be attempted without the existing review it targets
# 🔗 Dependencies:
# dataclasses, domain models (Review, ReviewDraft), app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# ReviewFlowController, review API endpoints (state serialization), tests

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Union

from app.shared.core.exceptions import ConflictError, NotFoundError, ReviewAppException, ValidationError

from ...domain.models.review import Review, ReviewDraft

LABEL_REVIEW = "Review"
LABEL_UPDATE = "Update"
SUBMIT_LABEL = "Submit Review"
UPDATE_LABEL = "Update Review"
SUBMITTING_LABEL = "Submitting..."
DUPLICATE_TITLE = "Already Reviewed"
DUPLICATE_PROMPT = "You have already reviewed this oyster. Would you like to update your existing review?"
DUPLICATE_ACTION_LABEL = "Update Review?"


class PersistOutcome(str, Enum):
    """How a Persisted state was reached"""
    CREATED = "created"
    UPDATED = "updated"


class FailedDuring(str, Enum):
    """Which store call a Failed state came from"""
    SUBMIT = "submit"
    UPDATE = "update"


@dataclass(frozen=True)
class Composing:
    """Editing a new review. error holds the last rejected submit, if any."""
    name: ClassVar[str] = "composing"

    draft: ReviewDraft
    error: Optional[ValidationError] = None


@dataclass(frozen=True)
class Submitting:
    """Duplicate check and create in flight."""
    name: ClassVar[str] = "submitting"

    draft: ReviewDraft


@dataclass(frozen=True)
class DuplicateDetected:
    """
    The author already reviewed this subject. Nothing has been written;
    the only way forward is an explicit resolve_as_update().
    """
    name: ClassVar[str] = "duplicate_detected"

    draft: ReviewDraft
    existing: Review

    title: ClassVar[str] = DUPLICATE_TITLE
    prompt: ClassVar[str] = DUPLICATE_PROMPT
    action_label: ClassVar[str] = DUPLICATE_ACTION_LABEL


@dataclass(frozen=True)
class Resolving:
    """
    Editing the existing review before overwriting it.
    pending is True while the update call is in flight.
    """
    name: ClassVar[str] = "resolving"

    draft: ReviewDraft
    existing: Review
    pending: bool = False
    error: Optional[ValidationError] = None


@dataclass(frozen=True)
class Persisted:
    """The review is stored."""
    name: ClassVar[str] = "persisted"

    review: Review
    outcome: PersistOutcome


@dataclass(frozen=True)
class Failed:
    """
    A store call failed. The draft survives so the user can retry
    without retyping anything.
    """
    name: ClassVar[str] = "failed"

    error: ReviewAppException
    draft: ReviewDraft
    during: FailedDuring
    retryable: bool
    existing: Optional[Review] = None

    @property
    def message(self) -> str:
        return self.error.message

    @property
    def hint(self) -> Optional[str]:
        if isinstance(self.error, ConflictError):
            return "This oyster was just reviewed from another session. Retry to update that review instead."
        if isinstance(self.error, NotFoundError):
            return "This review no longer exists."
        if self.retryable:
            return "Failed to submit review. Please try again."
        return None


FlowState = Union[Composing, Submitting, DuplicateDetected, Resolving, Persisted, Failed]


def is_busy(state: FlowState) -> bool:
    """True while a store request of this flow is outstanding."""
    return isinstance(state, Submitting) or (isinstance(state, Resolving) and state.pending)


def is_update_mode(state: FlowState) -> bool:
    if isinstance(state, Resolving):
        return True
    if isinstance(state, Persisted):
        return state.outcome == PersistOutcome.UPDATED
    if isinstance(state, Failed):
        return state.during == FailedDuring.UPDATE
    return False


def flow_label(state: FlowState) -> str:
    """Heading label: "Update" when editing an existing review, else "Review"."""
    return LABEL_UPDATE if is_update_mode(state) else LABEL_REVIEW


def submit_label(state: FlowState) -> str:
    """Label of the primary button for the current state."""
    if is_busy(state):
        return SUBMITTING_LABEL
    return UPDATE_LABEL if is_update_mode(state) else SUBMIT_LABEL
