"""
Review Repository - Abstraction Layer for Review Storage
=========================================================

Provides a storage-agnostic interface for reading and mutating reviews.
The controller only ever sees this contract, so the backing store can be
SQLite in production and an in-memory double (or a mock) in tests.

USAGE:
    repository = SQLiteReviewRepository("bookreviews.db")
    repository.init()

    review = BookReview(title="Dune", rating=5)
    repository.create(review)      # staged, not yet durable
    repository.save_changes()      # committed, review.id assigned

    for review in repository.all_reviews:
        print(review.title, review.rating)
"""

from abc import ABC, abstractmethod
from typing import Iterable

from ...domain import BookReview


class RepositoryError(Exception):
    """Raised when the backing store fails to query or persist reviews."""


class ReviewRepository(ABC):
    """
    Abstract base class for review stores.
    Implement this interface to add new storage backends.

    Mutations are two-phase: create()/remove() only stage a change,
    save_changes() commits everything staged so far in one batch.
    """

    @property
    @abstractmethod
    def all_reviews(self) -> Iterable[BookReview]:
        """
        Lazily evaluated view over every stored review.

        Each iteration queries the store again; nothing is cached.
        """
        ...

    @abstractmethod
    def create(self, review: BookReview) -> None:
        """Stage a new review for insertion."""
        ...

    @abstractmethod
    def remove(self, review: BookReview) -> None:
        """Stage removal of a persisted review by id."""
        ...

    @abstractmethod
    def save_changes(self) -> None:
        """Commit all staged mutations. Raises RepositoryError on failure."""
        ...


class ReviewView:
    """
    Re-queryable iterable returned by `all_reviews`.

    Wraps a zero-argument loader and calls it on every iteration,
    so callers always see the current contents of the store.
    """

    def __init__(self, loader):
        self._loader = loader

    def __iter__(self):
        return iter(self._loader())


def ensure_persisted(review: BookReview) -> None:
    """Reject removal of a review the store never assigned an id to."""
    if not review.is_persisted:
        raise ValueError(f"Cannot remove a review that was never saved: {review!r}")
