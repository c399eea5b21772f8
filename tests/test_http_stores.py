"""Tests for the HTTP review and profile stores (httpx.MockTransport)."""

import json

import httpx
import pytest

from app.modules.review_management.application.flow.controller import ReviewFlowController
from app.modules.review_management.application.flow.states import Failed
from app.modules.review_management.domain.models.review import ReviewDraft, ReviewRating
from app.modules.review_management.infrastructure.external.review_api_client import HttpReviewStore
from app.modules.user_management.infrastructure.external.profile_api_client import HttpProfileStore
from app.shared.core.exceptions import AuthenticationError, ConflictError, NotFoundError, StoreError

REVIEW_JSON = {
    "id": "r1",
    "author_id": "a1",
    "subject_id": "s1",
    "rating": "LIKE_IT",
    "text": "Test review",
    "size": None,
    "body": None,
    "sweet_brininess": 7,
    "flavorfulness": None,
    "creaminess": None,
    "created_at": "2026-10-01T12:00:00Z",
    "updated_at": "2026-10-01T12:00:00Z",
}


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://reviews.test/api/v1")


def _error(status_code: int, code: str, message: str) -> httpx.Response:
    return httpx.Response(status_code, json={"error": {"code": code, "message": message, "details": {}}})


def _content():
    return ReviewDraft(rating="LIKE_IT", text="Test review", sweet_brininess=7).validate_content()


class TestHttpReviewStore:
    async def test_lookup_returns_existing_review(self):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json={"has_review": True, "review": REVIEW_JSON})

        store = HttpReviewStore(access_token="tok", client=_client(handler))
        review = await store.lookup("a1", "s1")

        assert review.id == "r1"
        assert review.rating == ReviewRating.LIKE_IT
        assert requests[0].url.path == "/api/v1/reviews/check/s1"
        assert requests[0].headers["Authorization"] == "Bearer tok"

    async def test_lookup_without_review_returns_none(self):
        store = HttpReviewStore(client=_client(lambda r: httpx.Response(200, json={"has_review": False, "review": None})))

        assert await store.lookup("a1", "s1") is None

    async def test_lookup_for_another_author_is_a_store_error(self):
        store = HttpReviewStore(client=_client(lambda r: httpx.Response(200, json={"has_review": True, "review": REVIEW_JSON})))

        with pytest.raises(StoreError):
            await store.lookup("someone-else", "s1")

    async def test_create_posts_flat_payload(self):
        bodies = []

        def handler(request):
            bodies.append(json.loads(request.content))
            return httpx.Response(201, json={"state": "persisted", "outcome": "created", "review": REVIEW_JSON})

        review = await HttpReviewStore(client=_client(handler)).create("a1", "s1", _content())

        assert review.id == "r1"
        assert bodies[0]["subject_id"] == "s1"
        assert bodies[0]["rating"] == "LIKE_IT"
        assert bodies[0]["sweet_brininess"] == 7

    async def test_create_answered_with_duplicate_is_a_conflict(self):
        def handler(request):
            return httpx.Response(200, json={"state": "duplicate_detected", "existing_review": REVIEW_JSON})

        with pytest.raises(ConflictError) as exc_info:
            await HttpReviewStore(client=_client(handler)).create("a1", "s1", _content())
        assert exc_info.value.details["review_id"] == "r1"

    async def test_update_missing_review_is_not_found(self):
        store = HttpReviewStore(client=_client(lambda r: _error(404, "NOT_FOUND", "Review not found")))

        with pytest.raises(NotFoundError):
            await store.update("r1", _content())

    async def test_get_by_id_missing_returns_none(self):
        store = HttpReviewStore(client=_client(lambda r: _error(404, "NOT_FOUND", "Review not found")))

        assert await store.get_by_id("r1") is None

    async def test_unauthorized_maps_to_authentication_error(self):
        store = HttpReviewStore(client=_client(lambda r: _error(401, "AUTHENTICATION_ERROR", "Not authenticated")))

        with pytest.raises(AuthenticationError):
            await store.list_for_author("a1")

    async def test_server_error_is_a_store_error(self):
        store = HttpReviewStore(client=_client(lambda r: httpx.Response(500, text="oops")))

        with pytest.raises(StoreError) as exc_info:
            await store.list_for_subject("s1")
        assert exc_info.value.details["status_code"] == 500

    async def test_reads_are_retried_on_transport_errors(self):
        attempts = []

        def handler(request):
            attempts.append(request)
            if len(attempts) < 3:
                raise httpx.ConnectError("connection refused", request=request)
            return httpx.Response(200, json={"reviews": [REVIEW_JSON]})

        reviews = await HttpReviewStore(client=_client(handler), read_attempts=3).list_for_subject("s1")

        assert len(attempts) == 3
        assert [r.id for r in reviews] == ["r1"]

    async def test_writes_are_not_retried(self):
        attempts = []

        def handler(request):
            attempts.append(request)
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(StoreError):
            await HttpReviewStore(client=_client(handler)).create("a1", "s1", _content())
        assert len(attempts) == 1

    async def test_created_answer_without_review_is_a_store_error(self):
        store = HttpReviewStore(client=_client(lambda r: httpx.Response(201, json={"state": "persisted"})))

        with pytest.raises(StoreError) as exc_info:
            await store.create("a1", "s1", _content())
        assert exc_info.value.details["operation"] == "create"

    async def test_invalid_review_object_is_a_store_error(self):
        store = HttpReviewStore(
            client=_client(lambda r: httpx.Response(200, json={"has_review": True, "review": {"id": "x"}}))
        )

        with pytest.raises(StoreError):
            await store.lookup("a1", "s1")

    async def test_non_object_body_is_a_store_error(self):
        store = HttpReviewStore(client=_client(lambda r: httpx.Response(200, json=["not", "a", "dict"])))

        with pytest.raises(StoreError):
            await store.update("r1", _content())

    async def test_invalid_review_in_listing_is_a_store_error(self):
        store = HttpReviewStore(
            client=_client(lambda r: httpx.Response(200, json={"reviews": [REVIEW_JSON, {"id": "x"}]})),
            read_attempts=1,
        )

        with pytest.raises(StoreError):
            await store.list_for_subject("s1")

    async def test_flow_over_malformed_create_answer_fails_retryably(self):
        def handler(request):
            if request.method == "GET":
                return httpx.Response(200, json={"has_review": False, "review": None})
            return httpx.Response(201, json=["not", "a", "dict"])

        controller = ReviewFlowController("a1", "s1", HttpReviewStore(client=_client(handler)))

        state = await controller.submit(ReviewDraft(rating="LIKE_IT", text="Test review"))

        assert isinstance(state, Failed)
        assert state.retryable
        assert isinstance(state.error, StoreError)
        assert state.draft.text == "Test review"

    async def test_context_manager_closes_client(self):
        client = _client(lambda r: httpx.Response(200, json={"reviews": []}))

        async with HttpReviewStore(client=client) as store:
            assert await store.list_for_author("a1") == []

        assert client.is_closed


PROFILE_JSON = {
    "user": {"id": "u1", "name": "Test User", "email": "test@example.com"},
    "stats": {"friends_private": True, "review_count": 3, "friend_count": 1},
    "friends": [{"id": "u2", "name": "Bob", "email": "bob@example.com"}],
}


class TestHttpProfileStore:
    async def test_private_profile_is_redacted(self):
        store = HttpProfileStore(client=_client(lambda r: httpx.Response(200, json=PROFILE_JSON)))

        profile = await store.get_public_profile("u1")

        assert profile.user.name == "Test User"
        assert profile.friends_private is True
        assert profile.friends is None

    async def test_unknown_user_is_not_found(self):
        store = HttpProfileStore(client=_client(lambda r: _error(404, "NOT_FOUND", "User not found")))

        with pytest.raises(NotFoundError):
            await store.get_public_profile("missing")

    async def test_malformed_profile_is_a_store_error(self):
        store = HttpProfileStore(client=_client(lambda r: httpx.Response(200, json={"user": {"id": "u1"}})), read_attempts=1)

        with pytest.raises(StoreError):
            await store.get_public_profile("u1")
