# 📄 File: app/modules/review_management/domain/services/duplicate_resolver.py
# 🧭 Purpose (Layman Explanation):
# Checks whether someone has already reviewed this oyster so we can offer to update their old review
# instead of silently adding a second one
# 🧪 Purpose (Technical Summary):
# Domain service performing the side-effect-free duplicate lookup that drives the create-vs-update decision
# of the review flow; lookup failures propagate so callers never mistake them for "no duplicate"
# 🔗 Dependencies:
# Domain models (Review), ReviewStore
# 🔄 Connected Modules / Calls From:
# ReviewFlowController, review API "check existing" endpoint

import logging
from typing import Optional

from ..models.review import Review
from ..repositories.review_repository import ReviewStore

logger = logging.getLogger(__name__)


class DuplicateResolver:
    """
    Finds an author's existing review for a subject.

    The answer is advisory: it lets the flow ask for confirmation before
    overwriting, but the store's uniqueness constraint stays the real guard
    against two concurrent creates.
    """

    def __init__(self, review_store: ReviewStore):
        self.review_store = review_store

    async def check(self, author_id: str, subject_id: str) -> Optional[Review]:
        """
        Look up a prior review for (author_id, subject_id).

        Returns:
            The existing Review, or None when the author has not reviewed the subject

        Raises:
            StoreError: If the lookup itself fails
        """
        existing = await self.review_store.lookup(author_id, subject_id)

        if existing is not None:
            logger.info(
                f"Duplicate review detected for author {author_id} on subject {subject_id}: {existing.id}"
            )
        else:
            logger.debug(f"No prior review for author {author_id} on subject {subject_id}")

        return existing
