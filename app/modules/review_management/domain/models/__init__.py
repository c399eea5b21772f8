# 📄 File: app/modules/review_management/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the core review data models - what a review, a draft and a rating are
# 🧪 Purpose (Technical Summary):
# Package initialization for review domain models: Review entity, ReviewDraft input, ReviewContent value object and ReviewRating enum
# 🔗 Dependencies:
# review.py
# 🔄 Connected Modules / Calls From:
# Domain services, review stores, application flow, presentation schemas

from .review import (
    Review,
    ReviewContent,
    ReviewDraft,
    ReviewRating,
    TASTING_ATTRIBUTES,
    normalize_text,
)

__all__ = [
    "Review",
    "ReviewContent",
    "ReviewDraft",
    "ReviewRating",
    "TASTING_ATTRIBUTES",
    "normalize_text",
]
