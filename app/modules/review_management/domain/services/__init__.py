# 📄 File: app/modules/review_management/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the review business rules: spotting duplicate reviews and scoring oysters
# 🧪 Purpose (Technical Summary):
# Domain services for duplicate detection and rating aggregation
# 🔗 Dependencies:
# duplicate_resolver.py, rating_service.py
# 🔄 Connected Modules / Calls From:
# Application flow, review API endpoints

from .duplicate_resolver import DuplicateResolver
from .rating_service import (
    SubjectRatingService,
    SubjectScore,
    calculate_overall_score,
    rating_to_score,
    score_to_stars,
    score_to_verdict,
)

__all__ = [
    "DuplicateResolver",
    "SubjectRatingService",
    "SubjectScore",
    "calculate_overall_score",
    "rating_to_score",
    "score_to_stars",
    "score_to_verdict",
]
