# 📄 File: app/modules/review_management/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# The data formats review endpoints accept and return.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas of the review API.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - review endpoints, tests

from .review_schemas import (
    ReviewCheckResponse,
    ReviewEnvelope,
    ReviewListResponse,
    ReviewResponse,
    ReviewSubmitRequest,
    ReviewSubmitResponse,
    ReviewUpdateRequest,
    SubjectScoreResponse,
)

__all__ = [
    "ReviewSubmitRequest",
    "ReviewUpdateRequest",
    "ReviewResponse",
    "ReviewEnvelope",
    "ReviewSubmitResponse",
    "ReviewCheckResponse",
    "ReviewListResponse",
    "SubjectScoreResponse",
]
