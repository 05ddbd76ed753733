"""Tests for the per-title summary aggregation."""

from fractions import Fraction

import pytest

from book_reviews.domain import BookReview, ReviewSummary, round_half_up, summarize_reviews


def test_summary_groups_averages_and_orders_by_title(summary_reviews):
    assert summarize_reviews(summary_reviews) == [
        ReviewSummary(title="A", rating=1),
        ReviewSummary(title="B", rating=3),
        ReviewSummary(title="C", rating=5),
    ]


def test_summary_of_no_reviews_is_empty():
    assert summarize_reviews([]) == []


def test_half_mean_rounds_up():
    reviews = [BookReview(id=1, title="Dune", rating=2), BookReview(id=2, title="Dune", rating=3)]

    assert summarize_reviews(reviews) == [ReviewSummary(title="Dune", rating=3)]


def test_mean_below_half_rounds_down():
    # (1 + 1 + 2) / 3 = 1.33...
    reviews = [
        BookReview(id=1, title="Emma", rating=1),
        BookReview(id=2, title="Emma", rating=1),
        BookReview(id=3, title="Emma", rating=2),
    ]

    assert summarize_reviews(reviews) == [ReviewSummary(title="Emma", rating=1)]


def test_titles_are_grouped_case_sensitively():
    reviews = [
        BookReview(id=1, title="dune", rating=1),
        BookReview(id=2, title="Dune", rating=5),
    ]

    summaries = summarize_reviews(reviews)

    assert [s.title for s in summaries] == ["Dune", "dune"]
    assert [s.rating for s in summaries] == [5, 1]


def test_summary_accepts_any_iterable(summary_reviews):
    assert summarize_reviews(iter(summary_reviews)) == summarize_reviews(summary_reviews)


@pytest.mark.parametrize(
    "value, expected",
    [
        (Fraction(5, 2), 3),
        (Fraction(7, 2), 4),
        (Fraction(-5, 2), -2),
        (Fraction(9, 4), 2),
        (Fraction(11, 4), 3),
        (Fraction(4), 4),
    ],
)
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_summary_record_serializes_without_id():
    assert ReviewSummary(title="A", rating=1).to_dict() == {"title": "A", "rating": 1}
