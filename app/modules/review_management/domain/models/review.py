# 📄 File: app/modules/review_management/domain/models/review.py
# 🧭 Purpose (Layman Explanation):
# Defines what an oyster review is - the reaction (love it, like it, meh, whatever), the optional notes,
# and the tasting sliders - plus the "draft" a user fills in before submitting
# 🧪 Purpose (Technical Summary):
# Domain models for Review entities, the raw ReviewDraft edited by users and the validated ReviewContent
# handed to stores, enforcing rating enum membership, text trimming and tasting attribute bounds
# 🔗 Dependencies:
# pydantic, datetime, typing, uuid, enum, app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# review flow controller, duplicate resolver, review stores, rating service, review API schemas

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.shared.core.exceptions import ValidationError

DEFAULT_TEXT_MAX_LENGTH = 1000
ATTRIBUTE_MIN = 1
ATTRIBUTE_MAX = 10

TASTING_ATTRIBUTES = ("size", "body", "sweet_brininess", "flavorfulness", "creaminess")


class ReviewRating(str, Enum):
    """Reaction levels a reviewer can pick, strongest first"""
    LOVE_IT = "LOVE_IT"
    LIKE_IT = "LIKE_IT"
    MEH = "MEH"
    WHATEVER = "WHATEVER"

    @classmethod
    def parse(cls, value: Any) -> "ReviewRating":
        """
        Resolve a raw rating into the enum.

        Raises:
            ValidationError: If the rating is missing or not a recognized value
        """
        if isinstance(value, cls):
            return value
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationError("Rating is required", field="rating", constraint="required")
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise ValidationError(
                "Invalid rating value",
                field="rating",
                value=value,
                constraint=f"one of {[r.value for r in cls]}",
            ) from None


def normalize_text(text: Optional[str]) -> Optional[str]:
    """Trim review text; whitespace-only text counts as no text."""
    if text is None:
        return None
    trimmed = text.strip()
    return trimmed or None


class ReviewContent(BaseModel):
    """
    Validated review content, ready to be persisted.

    Only produced by ReviewDraft.validate_content(), so a store never
    receives an unrecognized rating or untrimmed text.
    """
    model_config = ConfigDict(frozen=True)

    rating: ReviewRating
    text: Optional[str] = None
    size: Optional[int] = None
    body: Optional[int] = None
    sweet_brininess: Optional[int] = None
    flavorfulness: Optional[int] = None
    creaminess: Optional[int] = None

    def attributes(self) -> Dict[str, Optional[int]]:
        return {name: getattr(self, name) for name in TASTING_ATTRIBUTES}


class ReviewDraft(BaseModel):
    """
    What the user is composing: a reaction, optional notes and tasting sliders.

    The rating is kept raw here (it comes straight from the user or a request
    body); validation happens on submit so a bad rating can be reported
    without contacting any store.
    """
    model_config = ConfigDict(frozen=True)

    rating: Optional[str] = None
    text: Optional[str] = None
    size: Optional[int] = None
    body: Optional[int] = None
    sweet_brininess: Optional[int] = None
    flavorfulness: Optional[int] = None
    creaminess: Optional[int] = None

    def validate_content(self, max_text_length: int = DEFAULT_TEXT_MAX_LENGTH) -> ReviewContent:
        """
        Validate the draft and produce persistable content.

        Raises:
            ValidationError: On a missing/unknown rating, over-long text
                or a tasting attribute outside 1-10
        """
        rating = ReviewRating.parse(self.rating)
        text = normalize_text(self.text)

        if text is not None and len(text) > max_text_length:
            raise ValidationError(
                "Notes too long",
                field="text",
                constraint=f"max_length={max_text_length}",
            )

        attributes = {}
        for name in TASTING_ATTRIBUTES:
            value = getattr(self, name)
            if value is not None and not (ATTRIBUTE_MIN <= value <= ATTRIBUTE_MAX):
                raise ValidationError(
                    f"{name} must be between {ATTRIBUTE_MIN} and {ATTRIBUTE_MAX}",
                    field=name,
                    value=value,
                )
            attributes[name] = value

        return ReviewContent(rating=rating, text=text, **attributes)

    @classmethod
    def from_content(cls, content: ReviewContent) -> "ReviewDraft":
        return cls(rating=content.rating.value, text=content.text, **content.attributes())


class Review(BaseModel):
    """
    Review domain model: one author's verdict on one subject (oyster).

    At most one Review exists per (author_id, subject_id); a later submission
    for the same pair updates this record (same id) instead of adding another.
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    author_id: str
    subject_id: str
    rating: ReviewRating
    text: Optional[str] = None
    size: Optional[int] = None
    body: Optional[int] = None
    sweet_brininess: Optional[int] = None
    flavorfulness: Optional[int] = None
    creaminess: Optional[int] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create_new(cls, author_id: str, subject_id: str, content: ReviewContent) -> "Review":
        return cls(
            author_id=author_id,
            subject_id=subject_id,
            rating=content.rating,
            text=content.text,
            **content.attributes(),
        )

    def with_content(self, content: ReviewContent) -> "Review":
        """Return the updated review: same id and creation time, new content."""
        return self.model_copy(update={
            "rating": content.rating,
            "text": content.text,
            **content.attributes(),
            "updated_at": datetime.now(timezone.utc),
        })

    def to_draft(self) -> ReviewDraft:
        """Draft pre-populated from this review, used when resolving a duplicate."""
        return ReviewDraft(
            rating=self.rating.value,
            text=self.text,
            size=self.size,
            body=self.body,
            sweet_brininess=self.sweet_brininess,
            flavorfulness=self.flavorfulness,
            creaminess=self.creaminess,
        )

    def content(self) -> ReviewContent:
        return ReviewContent(
            rating=self.rating,
            text=self.text,
            size=self.size,
            body=self.body,
            sweet_brininess=self.sweet_brininess,
            flavorfulness=self.flavorfulness,
            creaminess=self.creaminess,
        )

    def is_authored_by(self, user_id: str) -> bool:
        return self.author_id == user_id
