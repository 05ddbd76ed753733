"""Request and response models for the BookReviews API."""

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from ..domain import BookReview

MIN_RATING = 1
MAX_RATING = 5
MAX_TITLE_LENGTH = 200


class BookReviewCreate(BaseModel):
    """
    Payload accepted by POST /BookReviews.

    Unknown fields (including a client-supplied `id`) are ignored;
    the store assigns ids.
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=MAX_TITLE_LENGTH)
    rating: StrictInt = Field(..., ge=MIN_RATING, le=MAX_RATING)

    def to_review(self) -> BookReview:
        return BookReview(title=self.title, rating=self.rating)


class BookReviewOut(BaseModel):
    id: int
    title: str
    rating: int


class ReviewSummaryOut(BaseModel):
    title: str
    rating: int
