"""Tests for review domain models and services."""

import pytest

from app.modules.review_management.domain.models.review import Review, ReviewDraft, ReviewRating
from app.modules.review_management.domain.services.duplicate_resolver import DuplicateResolver
from app.modules.review_management.domain.services.rating_service import (
    SubjectRatingService,
    average_attributes,
    calculate_overall_score,
    rating_to_score,
    score_to_stars,
    score_to_verdict,
)
from app.shared.core.exceptions import StoreError, ValidationError


class TestReviewRating:
    def test_parse_is_case_and_space_insensitive(self):
        assert ReviewRating.parse(" like_it ") == ReviewRating.LIKE_IT

    def test_parse_accepts_enum_member(self):
        assert ReviewRating.parse(ReviewRating.MEH) is ReviewRating.MEH

    def test_missing_rating_is_required_error(self):
        with pytest.raises(ValidationError) as exc_info:
            ReviewRating.parse(None)
        assert exc_info.value.details["constraint"] == "required"

    def test_unknown_rating_is_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            ReviewRating.parse("FIVE_STARS")
        assert exc_info.value.field == "rating"


class TestReviewDraft:
    def test_validate_content_trims_text(self):
        content = ReviewDraft(rating="LOVE_IT", text="  Crisp  ").validate_content()

        assert content.rating == ReviewRating.LOVE_IT
        assert content.text == "Crisp"

    def test_text_at_limit_is_accepted(self):
        content = ReviewDraft(rating="MEH", text="x" * 1000).validate_content()
        assert len(content.text) == 1000

    def test_text_over_limit_is_rejected(self):
        with pytest.raises(ValidationError):
            ReviewDraft(rating="MEH", text="x" * 1001).validate_content()

    @pytest.mark.parametrize("value", [0, 11])
    def test_attribute_bounds(self, value):
        with pytest.raises(ValidationError) as exc_info:
            ReviewDraft(rating="MEH", sweet_brininess=value).validate_content()
        assert exc_info.value.field == "sweet_brininess"

    def test_review_to_draft_and_back_preserves_content(self):
        review = Review(author_id="a", subject_id="s", rating=ReviewRating.WHATEVER, text="Gritty", body=2)

        assert review.to_draft().validate_content() == review.content()


class TestRatingService:
    def test_rating_scores(self):
        assert rating_to_score(ReviewRating.LOVE_IT) == 9.0
        assert rating_to_score(ReviewRating.WHATEVER) == 2.5

    def test_overall_score_of_nothing_is_neutral(self):
        assert calculate_overall_score([]) == 5.0

    def test_overall_score_is_average(self):
        assert calculate_overall_score([ReviewRating.LOVE_IT, ReviewRating.LIKE_IT]) == 8.0

    def test_stars_and_verdict(self):
        assert score_to_stars(8.0) == 4.0
        assert score_to_verdict(8.0) == "Love It"
        assert score_to_verdict(6.5) == "Like It"
        assert score_to_verdict(4.95) == "Meh"
        assert score_to_verdict(2.5) == "Whatever"

    async def test_score_subject_uses_only_that_subject(self, review_store):
        for subject, rating in [("s1", ReviewRating.LOVE_IT), ("s1", ReviewRating.LIKE_IT), ("s2", ReviewRating.WHATEVER)]:
            review = Review(author_id=f"a-{len(review_store.reviews)}", subject_id=subject, rating=rating)
            review_store.reviews[review.id] = review

        score = await SubjectRatingService(review_store).score_subject("s1")

        assert score.review_count == 2
        assert score.score == 8.0
        assert score.stars == 4.0
        assert score.verdict == "Love It"
        assert score.attributes["size"] is None

    def test_attribute_averages_skip_unrated_values(self):
        reviews = [
            Review(author_id="a", subject_id="s", rating=ReviewRating.MEH, size=6, creaminess=7),
            Review(author_id="b", subject_id="s", rating=ReviewRating.MEH, size=7),
            Review(author_id="c", subject_id="s", rating=ReviewRating.MEH, size=8, body=3),
        ]

        averages = average_attributes(reviews)

        assert averages == {
            "size": 7.0,
            "body": 3.0,
            "sweet_brininess": None,
            "flavorfulness": None,
            "creaminess": 7.0,
        }

    def test_attribute_averages_are_rounded(self):
        reviews = [
            Review(author_id=author, subject_id="s", rating=ReviewRating.MEH, body=body)
            for author, body in [("a", 1), ("b", 2), ("c", 2)]
        ]

        assert average_attributes(reviews)["body"] == 1.67

    def test_attribute_averages_of_no_reviews_are_none(self):
        assert set(average_attributes([]).values()) == {None}


class TestDuplicateResolver:
    async def test_returns_existing_review(self, review_store):
        review = Review(author_id="a", subject_id="s", rating=ReviewRating.MEH)
        review_store.reviews[review.id] = review

        assert await DuplicateResolver(review_store).check("a", "s") == review
        assert await DuplicateResolver(review_store).check("b", "s") is None

    async def test_lookup_errors_propagate(self, review_store):
        review_store.failures["lookup"] = StoreError("down")

        with pytest.raises(StoreError):
            await DuplicateResolver(review_store).check("a", "s")
