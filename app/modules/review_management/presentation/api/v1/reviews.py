# 📄 File: app/modules/review_management/presentation/api/v1/reviews.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints for oyster reviews: check whether you already reviewed an oyster, submit a review,
# confirm updating your earlier one, list reviews and see an oyster's overall score.
#
# 🧪 Purpose (Technical Summary):
# FastAPI review endpoints. Submission runs ReviewFlowController per request: a new pair is created
# (201), an existing one is reported as duplicate_detected (200) and only overwritten through the
# explicit PUT confirmation, which is restricted to the review's author.
#
# 🔗 Dependencies:
# - FastAPI router, status codes
# - slowapi limiter (write endpoints)
# - review_management application flow, domain services and presentation schemas
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /reviews)
# - HttpReviewStore (remote clients)

"""
Reviews API Endpoints

Endpoints:
- GET /check/{subject_id}: Whether the caller already reviewed a subject
- POST /: Submit a review (created, or duplicate detected)
- PUT /{review_id}: Confirm an update of an existing review
- GET /me: Caller's reviews
- GET /author/{author_id}: Reviews written by a user
- GET /subject/{subject_id}: Reviews of a subject
- GET /subject/{subject_id}/score: Aggregate score of a subject
- GET /{review_id}: A single review
"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status

from app.modules.review_management.application.flow.controller import ReviewFlowController
from app.modules.review_management.application.flow.states import (
    Composing,
    DuplicateDetected,
    Failed,
    FlowState,
    Resolving,
)
from app.modules.review_management.domain.repositories.review_repository import ReviewStore
from app.modules.review_management.domain.services.duplicate_resolver import DuplicateResolver
from app.modules.review_management.domain.services.rating_service import SubjectRatingService
from app.modules.review_management.presentation.api.schemas.review_schemas import (
    ReviewCheckResponse,
    ReviewEnvelope,
    ReviewListResponse,
    ReviewResponse,
    ReviewSubmitRequest,
    ReviewSubmitResponse,
    ReviewUpdateRequest,
    SubjectScoreResponse,
)
from app.modules.review_management.presentation.dependencies import (
    get_duplicate_resolver,
    get_rating_service,
    get_review_store,
    limiter,
)
from app.shared.config.settings import get_settings
from app.shared.core.dependencies import CurrentUser, get_current_user
from app.shared.core.exceptions import AuthorizationError, NotFoundError

logger = logging.getLogger(__name__)

settings = get_settings()

# Create router
reviews_router = APIRouter()


def _raise_flow_error(state: FlowState) -> None:
    """Surface validation and store failures of a flow run as API errors."""
    if isinstance(state, (Composing, Resolving)) and state.error is not None:
        raise state.error
    if isinstance(state, Failed):
        raise state.error


@reviews_router.get(
    "/check/{subject_id}",
    response_model=ReviewCheckResponse,
    summary="Check for an existing review",
    description="Whether the current user has already reviewed the subject",
)
async def check_existing_review(
    subject_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    resolver: DuplicateResolver = Depends(get_duplicate_resolver),
) -> ReviewCheckResponse:
    existing = await resolver.check(current_user.user_id, subject_id)
    return ReviewCheckResponse(
        has_review=existing is not None,
        review=ReviewResponse.from_domain(existing) if existing else None,
    )


@reviews_router.post(
    "",
    response_model=ReviewSubmitResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit a review",
    description="Create the caller's review of a subject, or report the review they already wrote",
    responses={
        200: {"description": "Duplicate detected; nothing was written"},
        201: {"description": "Review created"},
        409: {"description": "Concurrent review of the same subject"},
        422: {"description": "Invalid rating, notes or tasting attributes"},
    },
)
@limiter.limit(settings.RATE_LIMIT_REVIEW_WRITES)
async def submit_review(
    request: Request,
    response: Response,
    review_request: ReviewSubmitRequest,
    current_user: CurrentUser = Depends(get_current_user),
    review_store: ReviewStore = Depends(get_review_store),
    resolver: DuplicateResolver = Depends(get_duplicate_resolver),
) -> ReviewSubmitResponse:
    """
    Run the submission flow for one request.

    A prior review by the caller is never overwritten here: the response
    carries it with the update prompt, and the client confirms through
    PUT /reviews/{review_id}.
    """
    controller = ReviewFlowController(
        author_id=current_user.user_id,
        subject_id=review_request.subject_id,
        review_store=review_store,
        duplicate_resolver=resolver,
        max_text_length=settings.REVIEW_TEXT_MAX_LENGTH,
    )

    state = await controller.submit(review_request.to_draft())
    _raise_flow_error(state)

    if isinstance(state, DuplicateDetected):
        response.status_code = status.HTTP_200_OK

    return ReviewSubmitResponse.from_state(state)


@reviews_router.put(
    "/{review_id}",
    response_model=ReviewEnvelope,
    summary="Update a review",
    description="Overwrite an existing review after the author confirmed the update",
    responses={
        403: {"description": "Only the author may update a review"},
        404: {"description": "Review not found"},
    },
)
@limiter.limit(settings.RATE_LIMIT_REVIEW_WRITES)
async def update_review(
    request: Request,
    review_id: str,
    review_request: ReviewUpdateRequest,
    current_user: CurrentUser = Depends(get_current_user),
    review_store: ReviewStore = Depends(get_review_store),
) -> ReviewEnvelope:
    existing = await review_store.get_by_id(review_id)
    if existing is None:
        raise NotFoundError("Review not found", resource_type="review", resource_id=review_id)

    if not existing.is_authored_by(current_user.user_id):
        logger.warning(f"User {current_user.user_id} attempted to update review {review_id}")
        raise AuthorizationError(
            "Only the author can update this review",
            resource_type="review",
            resource_id=review_id,
            user_id=current_user.user_id,
        )

    controller = ReviewFlowController.for_existing(
        existing,
        review_store,
        max_text_length=settings.REVIEW_TEXT_MAX_LENGTH,
    )
    state = await controller.confirm_update(review_request.to_draft())
    _raise_flow_error(state)

    return ReviewEnvelope(review=ReviewResponse.from_domain(state.review))


@reviews_router.get(
    "/me",
    response_model=ReviewListResponse,
    summary="List my reviews",
)
async def list_my_reviews(
    current_user: CurrentUser = Depends(get_current_user),
    review_store: ReviewStore = Depends(get_review_store),
) -> ReviewListResponse:
    reviews = await review_store.list_for_author(current_user.user_id)
    return ReviewListResponse.from_domain(reviews)


@reviews_router.get(
    "/author/{author_id}",
    response_model=ReviewListResponse,
    summary="List a user's reviews",
)
async def list_author_reviews(
    author_id: str,
    review_store: ReviewStore = Depends(get_review_store),
) -> ReviewListResponse:
    reviews = await review_store.list_for_author(author_id)
    return ReviewListResponse.from_domain(reviews)


@reviews_router.get(
    "/subject/{subject_id}",
    response_model=ReviewListResponse,
    summary="List reviews of a subject",
)
async def list_subject_reviews(
    subject_id: str,
    review_store: ReviewStore = Depends(get_review_store),
) -> ReviewListResponse:
    reviews = await review_store.list_for_subject(subject_id)
    return ReviewListResponse.from_domain(reviews)


@reviews_router.get(
    "/subject/{subject_id}/score",
    response_model=SubjectScoreResponse,
    summary="Get a subject's score",
    description="Average of all reviews on a 0-10 scale, with stars and verdict",
)
async def get_subject_score(
    subject_id: str,
    rating_service: SubjectRatingService = Depends(get_rating_service),
) -> SubjectScoreResponse:
    score = await rating_service.score_subject(subject_id)
    return SubjectScoreResponse.from_domain(score)


@reviews_router.get(
    "/{review_id}",
    response_model=ReviewEnvelope,
    summary="Get a review",
    responses={404: {"description": "Review not found"}},
)
async def get_review(
    review_id: str,
    review_store: ReviewStore = Depends(get_review_store),
) -> ReviewEnvelope:
    review = await review_store.get_by_id(review_id)
    if review is None:
        raise NotFoundError("Review not found", resource_type="review", resource_id=review_id)
    return ReviewEnvelope(review=ReviewResponse.from_domain(review))
