"""
BookReviews Controller
======================

Turns review requests into repository calls and shapes the HTTP responses.
The controller keeps nothing but the injected repository between calls,
so one instance per request (or one shared instance) is equally safe.

STATUS CODES:
- 200: list, summary, and a found review
- 201: review created (body = stored review, Location = its get-by-id path)
- 404: no review with that id (empty body)
- 500: the repository reported a storage failure
"""

import logging
from functools import wraps

from fastapi import Response, status
from fastapi.responses import JSONResponse

from ..domain import summarize_reviews
from ..infrastructure.persistence import ReviewRepository, RepositoryError
from .schemas import BookReviewCreate

logger = logging.getLogger(__name__)

DEFAULT_RESOURCE_ROOT = "/BookReviews"


def _storage_failures_as_500(action):
    """Convert RepositoryError raised by `action` into a 500 response."""

    @wraps(action)
    def wrapper(self, *args, **kwargs):
        try:
            return action(self, *args, **kwargs)
        except RepositoryError as e:
            logger.exception(f"Storage failure in {action.__name__}: {e}")
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"detail": "Storage failure"},
            )

    return wrapper


class BookReviewsController:
    """
    HTTP-facing operations over a ReviewRepository.

    Usage:
        controller = BookReviewsController(InMemoryReviewRepository())
        response = controller.get_review(2)
        print(response.status_code)
    """

    def __init__(self, repository: ReviewRepository, resource_root: str = DEFAULT_RESOURCE_ROOT):
        self._repository = repository
        self._resource_root = resource_root.rstrip("/")

    @_storage_failures_as_500
    def list_reviews(self) -> Response:
        reviews = [review.to_dict() for review in self._repository.all_reviews]
        return JSONResponse(content=reviews)

    @_storage_failures_as_500
    def get_review(self, review_id: int) -> Response:
        # Linear scan; indexing is the store's business.
        review = next(
            (r for r in self._repository.all_reviews if r.id == review_id),
            None,
        )
        if review is None:
            logger.warning(f"Review {review_id} not found")
            return Response(status_code=status.HTTP_404_NOT_FOUND)
        return JSONResponse(content=review.to_dict())

    @_storage_failures_as_500
    def summary(self) -> Response:
        summaries = summarize_reviews(self._repository.all_reviews)
        return JSONResponse(content=[s.to_dict() for s in summaries])

    @_storage_failures_as_500
    def create_review(self, payload: BookReviewCreate) -> Response:
        review = payload.to_review()

        self._repository.create(review)
        self._repository.save_changes()

        logger.info(f"Created review {review.id} for '{review.title}' (rating {review.rating})")
        return JSONResponse(
            status_code=status.HTTP_201_CREATED,
            content=review.to_dict(),
            headers={"Location": self.location_of(review.id)},
        )

    def location_of(self, review_id: int) -> str:
        """Path of the get-by-id route for `review_id`."""
        return f"{self._resource_root}/{review_id}"
