"""API tests through the ASGI app with the SQLite stores."""

import httpx
import pytest

from app.main import app
from app.modules.review_management.presentation.dependencies import limiter
from app.modules.user_management.infrastructure.database.models import (
    FriendshipModel,
    FriendshipStatus,
    UserModel,
)
from app.modules.user_management.presentation.dependencies import get_profile_store
from app.shared.config.settings import get_settings
from app.shared.core.exceptions import StoreError
from app.shared.core.security import create_access_token
from app.shared.infrastructure.database.session import get_db_session

from .conftest import FakeProfileStore

AUTHOR = "author-1"


def _auth(user_id: str = AUTHOR) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}


@pytest.fixture
async def client(session_factory):
    async def override_db_session():
        async with session_factory() as session:
            yield session
            await session.commit()

    app.dependency_overrides[get_db_session] = override_db_session
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client
    app.dependency_overrides.clear()


class TestReviewSubmission:
    async def test_submit_creates_review(self, client):
        response = await client.post(
            "/api/v1/reviews",
            json={"subject_id": "s1", "rating": "LIKE_IT", "text": "Test review"},
            headers=_auth(),
        )

        assert response.status_code == 201
        body = response.json()
        assert body["state"] == "persisted"
        assert body["outcome"] == "created"
        assert body["label"] == "Review"
        assert body["review"]["author_id"] == AUTHOR
        assert body["review"]["rating"] == "LIKE_IT"
        assert body["review"]["text"] == "Test review"

    async def test_duplicate_then_confirmed_update(self, client):
        first = await client.post(
            "/api/v1/reviews", json={"subject_id": "s1", "rating": "LIKE_IT", "text": "Test review"}, headers=_auth()
        )
        review_id = first.json()["review"]["id"]

        duplicate = await client.post(
            "/api/v1/reviews", json={"subject_id": "s1", "rating": "LOVE_IT", "text": "Second try"}, headers=_auth()
        )

        assert duplicate.status_code == 200
        body = duplicate.json()
        assert body["state"] == "duplicate_detected"
        assert body["existing_review"]["id"] == review_id
        assert body["existing_review"]["text"] == "Test review"
        assert body["action_label"] == "Update Review?"

        updated = await client.put(
            f"/api/v1/reviews/{review_id}", json={"rating": "LOVE_IT", "text": "Second try"}, headers=_auth()
        )

        assert updated.status_code == 200
        assert updated.json()["review"]["id"] == review_id
        assert updated.json()["review"]["rating"] == "LOVE_IT"

        listing = await client.get("/api/v1/reviews/subject/s1")
        assert listing.json()["total"] == 1

    async def test_check_reports_existing_review(self, client):
        await client.post("/api/v1/reviews", json={"subject_id": "s1", "rating": "MEH"}, headers=_auth())

        response = await client.get("/api/v1/reviews/check/s1", headers=_auth())
        other = await client.get("/api/v1/reviews/check/s1", headers=_auth("author-2"))

        assert response.json()["has_review"] is True
        assert other.json() == {"has_review": False, "review": None}

    async def test_invalid_rating_is_rejected(self, client):
        response = await client.post(
            "/api/v1/reviews", json={"subject_id": "s1", "rating": "NOPE"}, headers=_auth()
        )

        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["details"]["field"] == "rating"

    async def test_submit_requires_authentication(self, client):
        response = await client.post("/api/v1/reviews", json={"subject_id": "s1", "rating": "MEH"})

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "AUTHENTICATION_ERROR"

    async def test_only_author_may_update(self, client):
        created = await client.post("/api/v1/reviews", json={"subject_id": "s1", "rating": "MEH"}, headers=_auth())
        review_id = created.json()["review"]["id"]

        response = await client.put(
            f"/api/v1/reviews/{review_id}", json={"rating": "LOVE_IT"}, headers=_auth("intruder")
        )

        assert response.status_code == 403

    async def test_update_of_missing_review_is_404(self, client):
        response = await client.put("/api/v1/reviews/missing", json={"rating": "LOVE_IT"}, headers=_auth())

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"


class TestReviewQueries:
    async def test_my_reviews_and_author_reviews(self, client):
        await client.post("/api/v1/reviews", json={"subject_id": "s1", "rating": "MEH"}, headers=_auth())
        await client.post("/api/v1/reviews", json={"subject_id": "s2", "rating": "LIKE_IT"}, headers=_auth())

        mine = await client.get("/api/v1/reviews/me", headers=_auth())
        by_author = await client.get(f"/api/v1/reviews/author/{AUTHOR}")

        assert mine.json()["total"] == 2
        assert by_author.json()["total"] == 2

    async def test_subject_score(self, client):
        await client.post(
            "/api/v1/reviews", json={"subject_id": "s1", "rating": "LOVE_IT", "size": 6, "creaminess": 9}, headers=_auth("a")
        )
        await client.post(
            "/api/v1/reviews", json={"subject_id": "s1", "rating": "LIKE_IT", "size": 9}, headers=_auth("b")
        )

        response = await client.get("/api/v1/reviews/subject/s1/score")

        assert response.json() == {
            "subject_id": "s1",
            "review_count": 2,
            "score": 8.0,
            "stars": 4.0,
            "verdict": "Love It",
            "attributes": {
                "size": 7.5,
                "body": None,
                "sweet_brininess": None,
                "flavorfulness": None,
                "creaminess": 9.0,
            },
        }

    async def test_get_single_review(self, client):
        created = await client.post("/api/v1/reviews", json={"subject_id": "s1", "rating": "MEH"}, headers=_auth())
        review_id = created.json()["review"]["id"]

        found = await client.get(f"/api/v1/reviews/{review_id}")
        missing = await client.get("/api/v1/reviews/missing")

        assert found.json()["review"]["id"] == review_id
        assert missing.status_code == 404


@pytest.fixture
async def seeded_users(session_factory):
    async with session_factory() as session:
        session.add_all([
            UserModel(user_id="u1", name="Test User", email="test@example.com", friends_private=True),
            UserModel(user_id="u2", name="Bob", email="bob@example.com"),
        ])
        await session.flush()
        session.add(FriendshipModel(sender_id="u1", receiver_id="u2", status=FriendshipStatus.ACCEPTED))
        await session.commit()


class TestProfiles:
    async def test_private_friends_page(self, client, seeded_users):
        response = await client.get("/api/v1/users/u1/friends")

        assert response.status_code == 200
        assert response.json() == {
            "state": "private",
            "header_name": "Test User's Friends",
            "friends": None,
            "title": "Friends List is Private",
            "description": "Test User's friends list is set to private.",
        }

    async def test_visible_friends_page(self, client, seeded_users):
        response = await client.get("/api/v1/users/u2/friends")

        body = response.json()
        assert body["state"] == "visible"
        assert body["header_name"] == "Bob's Friends"
        assert [friend["name"] for friend in body["friends"]] == ["Test User"]

    async def test_public_profile_hides_private_friends(self, client, seeded_users):
        response = await client.get("/api/v1/users/u1/public-profile")

        body = response.json()
        assert body["user"]["name"] == "Test User"
        assert body["stats"]["friends_private"] is True
        assert body["friends"] is None

    async def test_unknown_user_is_404(self, client):
        response = await client.get("/api/v1/users/missing/friends")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    async def test_store_failure_is_503_not_private(self, client):
        failing = FakeProfileStore()
        failing.failure = StoreError("timeout")
        app.dependency_overrides[get_profile_store] = lambda: failing

        response = await client.get("/api/v1/users/u1/friends")

        assert response.status_code == 503
        assert response.json()["error"]["code"] == "STORE_ERROR"


class TestPlatform:
    async def test_request_id_is_echoed(self, client):
        response = await client.get("/api/v1/reviews/subject/s1", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"

    async def test_error_body_carries_request_id(self, client):
        response = await client.get("/api/v1/reviews/missing", headers={"X-Request-ID": "req-456"})

        assert response.json()["error"]["request_id"] == "req-456"

    async def test_liveness(self, client):
        response = await client.get("/api/v1/health/live")

        assert response.status_code == 200

    async def test_readiness_without_database_is_503(self, client):
        response = await client.get("/api/v1/health/ready")

        assert response.status_code == 503
        assert response.json()["status"] == "not_ready"


@pytest.fixture
def enabled_limiter(monkeypatch):
    limiter.reset()
    monkeypatch.setattr(limiter, "enabled", True)
    yield limiter
    limiter.reset()


class TestRateLimiting:
    async def test_review_writes_over_the_limit_are_rejected(self, client, enabled_limiter):
        allowed = int(get_settings().RATE_LIMIT_REVIEW_WRITES.split("/")[0])

        for attempt in range(allowed):
            response = await client.post(
                "/api/v1/reviews", json={"subject_id": f"s{attempt}", "rating": "MEH"}, headers=_auth()
            )
            assert response.status_code == 201

        response = await client.post(
            "/api/v1/reviews", json={"subject_id": "one-too-many", "rating": "MEH"}, headers=_auth()
        )

        assert response.status_code == 429
        assert response.headers["Retry-After"] == "60"
        assert response.json()["error"]["code"] == "RATE_LIMIT_EXCEEDED"
        assert response.headers["X-Error-Code"] == "RATE_LIMIT_EXCEEDED"

    async def test_reads_are_not_limited(self, client, enabled_limiter):
        allowed = int(get_settings().RATE_LIMIT_REVIEW_WRITES.split("/")[0])

        for _ in range(allowed + 1):
            response = await client.get("/api/v1/reviews/subject/s1")

        assert response.status_code == 200
