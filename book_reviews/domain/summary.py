"""
Summary Aggregation
===================

Collapses all reviews sharing a title into one ReviewSummary:

    1. group by title (exact, case-sensitive)
    2. arithmetic mean of the ratings in each group
    3. round half up (2.5 -> 3, -2.5 -> -2)
    4. order groups ascending by title

The mean is kept as a Fraction so midpoints are detected exactly; float
division would turn some halves into 2.4999... and round them the wrong way.
"""

import math
from collections import defaultdict
from fractions import Fraction
from typing import Dict, Iterable, List

from .review import BookReview, ReviewSummary


def round_half_up(value: Fraction) -> int:
    """Round to the nearest integer, midpoints toward positive infinity."""
    return math.floor(value + Fraction(1, 2))


def summarize_reviews(reviews: Iterable[BookReview]) -> List[ReviewSummary]:
    """Build one summary per distinct title, ordered by title."""
    groups: Dict[str, List[int]] = defaultdict(list)
    for review in reviews:
        groups[review.title].append(review.rating)

    return [
        ReviewSummary(
            title=title,
            rating=round_half_up(Fraction(sum(ratings), len(ratings))),
        )
        for title, ratings in sorted(groups.items())
    ]
