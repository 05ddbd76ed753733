# Domain Layer
# ============
# Pure review logic with no framework or storage imports:
# - review.py:  BookReview entity and ReviewSummary record
# - summary.py: per-title rating aggregation

from .review import BookReview, ReviewSummary
from .summary import round_half_up, summarize_reviews

__all__ = ["BookReview", "ReviewSummary", "round_half_up", "summarize_reviews"]
