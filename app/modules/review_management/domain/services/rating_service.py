# 📄 File: app/modules/review_management/domain/services/rating_service.py
# 🧭 Purpose (Layman Explanation):
# Turns everyone's reactions to an oyster into one overall score and star rating, plus the
# average of each tasting attribute (size, body, brininess, flavor, creaminess)
# 🧪 Purpose (Technical Summary):
# Domain service mapping ReviewRating values to numeric scores, aggregating them per subject,
# converting scores to verdict labels and stars, and averaging the tasting attributes
# 🔗 Dependencies:
# Domain models (ReviewRating, Review), ReviewStore
# 🔄 Connected Modules / Calls From:
# Review API score endpoint

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from ..models.review import TASTING_ATTRIBUTES, Review, ReviewRating
from ..repositories.review_repository import ReviewStore

logger = logging.getLogger(__name__)

# Midpoint of each rating's score band on a 0-10 scale
RATING_SCORES = {
    ReviewRating.LOVE_IT: 9.0,    # 8.0-10.0
    ReviewRating.LIKE_IT: 7.0,    # 6.0-7.9
    ReviewRating.MEH: 4.95,       # 4.0-5.9
    ReviewRating.WHATEVER: 2.5,   # 1.0-3.9
}

NEUTRAL_SCORE = 5.0

# (lower bound, verdict) from best to worst
VERDICTS = [
    (8.0, "Love It"),
    (6.0, "Like It"),
    (4.0, "Meh"),
    (0.0, "Whatever"),
]


def rating_to_score(rating: ReviewRating) -> float:
    """Convert a rating to its numeric score; unknown values score neutral."""
    return RATING_SCORES.get(rating, NEUTRAL_SCORE)


def calculate_overall_score(ratings: Iterable[ReviewRating]) -> float:
    """Average score of the given ratings, 5.0 when there are none."""
    scores = [rating_to_score(rating) for rating in ratings]
    if not scores:
        return NEUTRAL_SCORE
    return round(sum(scores) / len(scores), 2)


def score_to_stars(score: float) -> float:
    """Convert a 0-10 score to a 0-5 star rating."""
    return round(score / 2, 1)


def average_attributes(reviews: Iterable[Review]) -> Dict[str, Optional[float]]:
    """
    Mean of each tasting attribute over the reviews that rated it.

    Unrated attributes are skipped; an attribute nobody rated is None.
    """
    values: Dict[str, List[int]] = {name: [] for name in TASTING_ATTRIBUTES}
    for review in reviews:
        for name in TASTING_ATTRIBUTES:
            value = getattr(review, name)
            if value is not None:
                values[name].append(value)

    return {
        name: round(sum(rated) / len(rated), 2) if rated else None
        for name, rated in values.items()
    }


def score_to_verdict(score: float) -> str:
    for lower_bound, verdict in VERDICTS:
        if score >= lower_bound:
            return verdict
    return "Meh"


@dataclass(frozen=True)
class SubjectScore:
    subject_id: str
    review_count: int
    score: float
    stars: float
    verdict: str
    # Keyed by tasting attribute name
    attributes: Dict[str, Optional[float]]


class SubjectRatingService:
    """Aggregates the reviews of a subject into a single score."""

    def __init__(self, review_store: ReviewStore):
        self.review_store = review_store

    async def score_subject(self, subject_id: str) -> SubjectScore:
        reviews: List[Review] = await self.review_store.list_for_subject(subject_id)
        score = calculate_overall_score(review.rating for review in reviews)

        logger.debug(f"Subject {subject_id} scored {score} from {len(reviews)} reviews")
        return SubjectScore(
            subject_id=subject_id,
            review_count=len(reviews),
            score=score,
            stars=score_to_stars(score),
            verdict=score_to_verdict(score),
            attributes=average_attributes(reviews),
        )
