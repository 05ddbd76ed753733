"""
In-Memory Review Repository
===========================

Dict-backed ReviewRepository for tests and local development. Keeps the
same stage/commit split as the SQLite store, so code exercised against it
behaves the same in production.
"""

import logging
import threading
from copy import copy
from typing import Dict, Iterable, List, Optional, Tuple

from ...domain import BookReview
from .repository import ReviewRepository, RepositoryError, ReviewView, ensure_persisted

logger = logging.getLogger(__name__)


class InMemoryReviewRepository(ReviewRepository):
    """
    Review store living in process memory.

    Seeded reviews keep their ids; new ids continue after the highest seed.
    Iterating `all_reviews` yields copies, so callers cannot mutate the store.
    """

    def __init__(self, reviews: Optional[Iterable[BookReview]] = None):
        self._records: Dict[int, BookReview] = {}
        self._pending: List[Tuple[str, BookReview]] = []
        self._lock = threading.Lock()
        self._last_id = 0

        for review in reviews or []:
            if not review.is_persisted:
                raise ValueError(f"Seed reviews need an id: {review!r}")
            self._records[review.id] = copy(review)
            self._last_id = max(self._last_id, review.id)

    @property
    def all_reviews(self) -> ReviewView:
        return ReviewView(self._snapshot)

    def _snapshot(self) -> List[BookReview]:
        with self._lock:
            return [copy(review) for review in self._records.values()]

    def create(self, review: BookReview) -> None:
        with self._lock:
            self._pending.append(("create", review))

    def remove(self, review: BookReview) -> None:
        ensure_persisted(review)
        with self._lock:
            self._pending.append(("remove", review))

    def save_changes(self) -> None:
        # Staging and commit share the lock, so a batch is taken whole.
        with self._lock:
            pending, self._pending = self._pending, []
            records = dict(self._records)
            last_id = self._last_id
            assigned = []

            for action, review in pending:
                if action == "create":
                    last_id += 1
                    records[last_id] = BookReview(id=last_id, title=review.title, rating=review.rating)
                    assigned.append((review, last_id))
                elif review.id in records:
                    del records[review.id]
                else:
                    raise RepositoryError(f"Review {review.id} does not exist")

            self._records = records
            self._last_id = last_id

        for review, review_id in assigned:
            review.id = review_id

        if pending:
            logger.debug(f"Committed {len(pending)} staged change(s) in memory")
