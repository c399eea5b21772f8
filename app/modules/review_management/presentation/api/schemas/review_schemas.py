# 📄 File: app/modules/review_management/presentation/api/schemas/review_schemas.py
# 🧭 Purpose (Layman Explanation):
# Describes what the review web service accepts and returns: the review form, a saved review,
# the "you already reviewed this" answer, and an oyster's overall score.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for the review endpoints. Request bodies keep the rating raw
# so that rating validation happens in the review flow and reports the flow's own messages.
#
# 🔗 Dependencies:
# - pydantic for schema validation and serialization
# - review_management domain models and flow states
#
# 🔄 Connected Modules / Calls From:
# - app.modules.review_management.presentation.api.v1.reviews
# - HttpReviewStore (parses the same JSON shapes)

"""
Review API Schemas

Request Schemas:
- ReviewSubmitRequest: new review for a subject
- ReviewUpdateRequest: replacement content for an existing review

Response Schemas:
- ReviewResponse / ReviewEnvelope: a stored review
- ReviewSubmitResponse: outcome of running the submission flow
- ReviewCheckResponse: whether the caller already reviewed a subject
- ReviewListResponse: reviews of a subject or an author
- SubjectScoreResponse: aggregate score of a subject
"""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.modules.review_management.application.flow.states import (
    DuplicateDetected,
    FlowState,
    Persisted,
    flow_label,
    submit_label,
)
from app.modules.review_management.domain.models.review import Review, ReviewDraft
from app.modules.review_management.domain.services.rating_service import SubjectScore


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class ReviewContentRequest(BaseModel):
    """Fields shared by review create and update requests."""

    rating: Optional[str] = Field(
        default=None,
        description="Reaction: LOVE_IT, LIKE_IT, MEH or WHATEVER",
        examples=["LIKE_IT"],
    )
    text: Optional[str] = Field(
        default=None,
        description="Optional tasting notes",
        examples=["Test review"],
    )
    size: Optional[int] = Field(default=None, description="Tasting attribute, 1-10")
    body: Optional[int] = Field(default=None, description="Tasting attribute, 1-10")
    sweet_brininess: Optional[int] = Field(default=None, description="Tasting attribute, 1-10")
    flavorfulness: Optional[int] = Field(default=None, description="Tasting attribute, 1-10")
    creaminess: Optional[int] = Field(default=None, description="Tasting attribute, 1-10")

    def to_draft(self) -> ReviewDraft:
        return ReviewDraft(**self.model_dump(exclude={"subject_id"}))


class ReviewSubmitRequest(ReviewContentRequest):
    """Submit a review for a subject; an existing review is reported, not overwritten."""

    subject_id: str = Field(
        ...,
        min_length=1,
        max_length=36,
        description="Oyster being reviewed",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "subject_id": "0f8fad5b-d9cb-469f-a165-70867728950e",
                "rating": "LIKE_IT",
                "text": "Test review",
                "sweet_brininess": 7,
            }
        }
    )


class ReviewUpdateRequest(ReviewContentRequest):
    """Replacement content for an existing review (the confirmed update)."""


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class ReviewResponse(BaseModel):
    """A stored review."""

    id: str
    author_id: str
    subject_id: str
    rating: str
    text: Optional[str] = None
    size: Optional[int] = None
    body: Optional[int] = None
    sweet_brininess: Optional[int] = None
    flavorfulness: Optional[int] = None
    creaminess: Optional[int] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, review: Review) -> "ReviewResponse":
        return cls(**review.model_dump(exclude={"rating"}), rating=review.rating.value)


class ReviewEnvelope(BaseModel):
    review: ReviewResponse


class ReviewSubmitResponse(BaseModel):
    """
    Result of running the submission flow for a request.

    state is "persisted" (with outcome and review) or "duplicate_detected"
    (with existing_review and the prompt to show before updating it).
    """

    state: str
    label: str = Field(..., description='Heading label, "Review" or "Update"')
    submit_label: str = Field(..., description="Primary button label")
    outcome: Optional[str] = None
    review: Optional[ReviewResponse] = None
    existing_review: Optional[ReviewResponse] = None
    prompt: Optional[str] = None
    action_label: Optional[str] = None

    @classmethod
    def from_state(cls, state: FlowState) -> "ReviewSubmitResponse":
        response = cls(state=state.name, label=flow_label(state), submit_label=submit_label(state))

        if isinstance(state, Persisted):
            response.outcome = state.outcome.value
            response.review = ReviewResponse.from_domain(state.review)
        elif isinstance(state, DuplicateDetected):
            response.existing_review = ReviewResponse.from_domain(state.existing)
            response.prompt = state.prompt
            response.action_label = state.action_label

        return response


class ReviewCheckResponse(BaseModel):
    has_review: bool
    review: Optional[ReviewResponse] = None


class ReviewListResponse(BaseModel):
    reviews: List[ReviewResponse]
    total: int

    @classmethod
    def from_domain(cls, reviews: List[Review]) -> "ReviewListResponse":
        return cls(reviews=[ReviewResponse.from_domain(review) for review in reviews], total=len(reviews))


class SubjectScoreResponse(BaseModel):
    subject_id: str
    review_count: int
    score: float = Field(..., description="Average score on a 0-10 scale")
    stars: float = Field(..., description="Score on a 0-5 star scale")
    verdict: str
    attributes: Dict[str, Optional[float]] = Field(
        ...,
        description="Mean of each tasting attribute (1-10); null when no review rated it",
    )

    @classmethod
    def from_domain(cls, score: SubjectScore) -> "SubjectScoreResponse":
        return cls(
            subject_id=score.subject_id,
            review_count=score.review_count,
            score=score.score,
            stars=score.stars,
            verdict=score.verdict,
            attributes=dict(score.attributes),
        )
