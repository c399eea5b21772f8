# 📄 File: app/modules/review_management/infrastructure/external/review_api_client.py
# 🧭 Purpose (Layman Explanation):
# Lets an app talk to the review web service as if it were a local review store, so the same
# "write a review" flow works on a phone or script that only has network access.
#
# 🧪 Purpose (Technical Summary):
# ReviewStore implementation over the Oyster Review HTTP API (shared APIClient). A duplicate_detected
# answer to a create is reported as ConflictError, matching the database store's contract.
# Bodies that do not parse as reviews are reported as StoreError.
#
# 🔗 Dependencies:
# - app.shared.infrastructure.external_apis.api_client (httpx + tenacity)
# - review_management domain models and ReviewStore
#
# 🔄 Connected Modules / Calls From:
# - ReviewFlowController when driven from a remote client
# - tests (with httpx.MockTransport)

import logging
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from app.modules.review_management.domain.models.review import Review, ReviewContent
from app.modules.review_management.domain.repositories.review_repository import ReviewStore
from app.shared.core.exceptions import ConflictError, NotFoundError, StoreError
from app.shared.infrastructure.external_apis.api_client import APIClient

logger = logging.getLogger(__name__)


class HttpReviewStore(ReviewStore):
    """
    ReviewStore backed by the review HTTP API.

    The API identifies the author from the bearer token, so author_id
    arguments must belong to the token's user.
    """

    def __init__(
        self,
        access_token: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        read_attempts: int = 3,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.api = APIClient(
            "review",
            access_token=access_token,
            base_url=base_url,
            timeout=timeout,
            read_attempts=read_attempts,
            client=client,
        )

    async def __aenter__(self) -> "HttpReviewStore":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.api.close()

    async def lookup(self, author_id: str, subject_id: str) -> Optional[Review]:
        data = self._expect_object(await self.api.get(f"/reviews/check/{subject_id}", operation="lookup"), "lookup")
        if not data.get("has_review") or not data.get("review"):
            return None

        review = self._parse_review(data, "lookup")
        if review.author_id != author_id:
            raise StoreError(
                "Review API answered for a different author",
                operation="lookup",
                store=self.api.api_name,
                details={"expected_author_id": author_id, "author_id": review.author_id},
            )
        return review

    async def create(self, author_id: str, subject_id: str, content: ReviewContent) -> Review:
        payload = {"subject_id": subject_id, **self._content_payload(content)}
        data = self._expect_object(await self.api.send("POST", "/reviews", payload, operation="create"), "create")

        # The API answers with the existing review instead of creating a second one
        if data.get("state") == "duplicate_detected":
            existing = data.get("existing_review")
            existing_id = existing.get("id") if isinstance(existing, dict) else None
            logger.info(f"Review API reported an existing review {existing_id} for {subject_id}")
            raise ConflictError(
                "A review for this subject by this author already exists",
                resource_type="review",
                details={"author_id": author_id, "subject_id": subject_id, "review_id": existing_id},
            )

        return self._parse_review(data, "create")

    async def update(self, review_id: str, content: ReviewContent) -> Review:
        data = await self.api.send("PUT", f"/reviews/{review_id}", self._content_payload(content), operation="update")
        return self._parse_review(self._expect_object(data, "update"), "update")

    async def get_by_id(self, review_id: str) -> Optional[Review]:
        try:
            data = await self.api.get(f"/reviews/{review_id}", operation="get")
        except NotFoundError:
            return None
        return self._parse_review(self._expect_object(data, "get"), "get")

    async def list_for_subject(self, subject_id: str) -> List[Review]:
        data = await self.api.get(f"/reviews/subject/{subject_id}", operation="list")
        return self._parse_reviews(self._expect_object(data, "list"), "list")

    async def list_for_author(self, author_id: str) -> List[Review]:
        data = await self.api.get(f"/reviews/author/{author_id}", operation="list")
        return self._parse_reviews(self._expect_object(data, "list"), "list")

    # =========================================================================
    # RESPONSE PARSING
    # =========================================================================

    def _malformed(self, operation: str, reason: str) -> StoreError:
        logger.error(f"Malformed review API response to {operation}: {reason}")
        return StoreError(
            "Review API returned a malformed response",
            operation=operation,
            store=self.api.api_name,
            details={"reason": reason},
        )

    def _expect_object(self, data: Any, operation: str) -> Dict[str, Any]:
        if not isinstance(data, dict):
            raise self._malformed(operation, f"expected an object, got {type(data).__name__}")
        return data

    def _parse_review(self, data: Dict[str, Any], operation: str) -> Review:
        try:
            return Review.model_validate(data["review"])
        except KeyError as e:
            raise self._malformed(operation, "missing 'review'") from e
        except PydanticValidationError as e:
            raise self._malformed(operation, f"invalid review: {e.error_count()} errors") from e

    def _parse_reviews(self, data: Dict[str, Any], operation: str) -> List[Review]:
        items = data.get("reviews", [])
        if not isinstance(items, list):
            raise self._malformed(operation, "'reviews' is not a list")
        try:
            return [Review.model_validate(item) for item in items]
        except PydanticValidationError as e:
            raise self._malformed(operation, f"invalid review: {e.error_count()} errors") from e

    @staticmethod
    def _content_payload(content: ReviewContent) -> Dict[str, Any]:
        return {"rating": content.rating.value, "text": content.text, **content.attributes()}
