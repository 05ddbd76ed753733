"""
SQLite Review Repository - Review Data Persistence
===================================================

Relational implementation of ReviewRepository backed by the stdlib sqlite3
driver. A connection is opened per operation, so one repository instance is
cheap and is created per request.
"""

import sqlite3
import logging
from typing import List, Tuple
from contextlib import contextmanager

from ...domain import BookReview
from .repository import ReviewRepository, RepositoryError, ReviewView, ensure_persisted

logger = logging.getLogger(__name__)

DATABASE_FILE = "bookreviews.db"

CREATE = "create"
REMOVE = "remove"


class SQLiteReviewRepository(ReviewRepository):
    """
    SQLite store for book reviews.

    Usage:
        repository = SQLiteReviewRepository("bookreviews.db")
        repository.init()

        repository.create(BookReview(title="Dune", rating=5))
        repository.save_changes()

        titles = [r.title for r in repository.all_reviews]
    """

    def __init__(self, db_path: str = DATABASE_FILE):
        self.db_path = str(db_path)
        self._pending: List[Tuple[str, BookReview]] = []

    @contextmanager
    def _get_connection(self):
        """Get database connection; commits on success, rolls back on error."""
        try:
            conn = sqlite3.connect(self.db_path)
        except sqlite3.Error as e:
            raise RepositoryError(f"Cannot open database {self.db_path}: {e}") from e

        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise RepositoryError(f"Database operation failed: {e}") from e
        finally:
            conn.close()

    def init(self):
        """Create the reviews table if it does not exist yet."""
        with self._get_connection() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS book_reviews (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    title TEXT NOT NULL,
                    rating INTEGER NOT NULL
                )
            """)
        logger.info(f"Database initialized: {self.db_path}")

    # ── Queryable view ─────────────────────────────────────────────

    @property
    def all_reviews(self) -> ReviewView:
        return ReviewView(self._fetch_all)

    def _fetch_all(self) -> List[BookReview]:
        with self._get_connection() as conn:
            rows = conn.execute("SELECT id, title, rating FROM book_reviews ORDER BY id").fetchall()
            return [self._row_to_review(row) for row in rows]

    # ── Staged mutations ───────────────────────────────────────────

    def create(self, review: BookReview) -> None:
        self._pending.append((CREATE, review))

    def remove(self, review: BookReview) -> None:
        ensure_persisted(review)
        self._pending.append((REMOVE, review))

    def save_changes(self) -> None:
        """Apply every staged mutation in one transaction."""
        pending, self._pending = self._pending, []
        if not pending:
            return

        assigned = []
        with self._get_connection() as conn:
            for action, review in pending:
                if action == CREATE:
                    cursor = conn.execute(
                        "INSERT INTO book_reviews (title, rating) VALUES (?, ?)",
                        (review.title, review.rating)
                    )
                    assigned.append((review, cursor.lastrowid))
                else:
                    cursor = conn.execute("DELETE FROM book_reviews WHERE id = ?", (review.id,))
                    if cursor.rowcount == 0:
                        raise sqlite3.IntegrityError(f"Review {review.id} does not exist")

        # Ids are only handed out once the transaction committed.
        for review, review_id in assigned:
            review.id = review_id

        logger.info(f"Saved {len(pending)} staged change(s) to {self.db_path}")

    def _row_to_review(self, row: sqlite3.Row) -> BookReview:
        """Convert database row to BookReview object."""
        return BookReview(id=row["id"], title=row["title"], rating=row["rating"])


def init_database(db_path: str = DATABASE_FILE) -> SQLiteReviewRepository:
    """Create the schema at `db_path` and return a repository bound to it."""
    repository = SQLiteReviewRepository(db_path)
    repository.init()
    return repository
