"""
Review Entities
===============

BookReview is the only stored entity. ReviewSummary is the derived,
per-title record produced by the summary endpoint and is never stored.
"""

from dataclasses import dataclass, asdict


@dataclass
class BookReview:
    """
    A single rated entry for a titled work.

    `id` stays 0 until the store assigns one on save_changes().
    """
    title: str
    rating: int
    id: int = 0

    @property
    def is_persisted(self) -> bool:
        return self.id > 0

    def to_dict(self) -> dict:
        return {"id": self.id, "title": self.title, "rating": self.rating}


@dataclass(frozen=True)
class ReviewSummary:
    """Averaged, rounded rating of every review sharing one title."""
    title: str
    rating: int

    def to_dict(self) -> dict:
        return asdict(self)
