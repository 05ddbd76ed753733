from .repository import ReviewRepository, RepositoryError
from .database import SQLiteReviewRepository, init_database
from .memory import InMemoryReviewRepository

__all__ = [
    "ReviewRepository",
    "RepositoryError",
    "SQLiteReviewRepository",
    "InMemoryReviewRepository",
    "init_database",
]
