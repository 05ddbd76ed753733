"""
FastAPI Web Application - Book Reviews API
==========================================

JSON API for listing, fetching, summarising and posting book reviews.
All routes live under the configured resource root (default /BookReviews).

Run with:
    uvicorn book_reviews.web.app:app
"""

import logging
from functools import partial
from typing import Callable, List, Optional
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI, Request, status

from book_reviews import __version__
from book_reviews.infrastructure.config import Settings, get_settings
from book_reviews.infrastructure.persistence import (
    ReviewRepository,
    SQLiteReviewRepository,
    init_database,
)
from book_reviews.web.controller import BookReviewsController
from book_reviews.web.schemas import BookReviewCreate, BookReviewOut, ReviewSummaryOut

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

RepositoryFactory = Callable[[], ReviewRepository]


# ── Dependencies ───────────────────────────────────────────────────

def get_repository(request: Request) -> ReviewRepository:
    """One repository (unit of work) per request."""
    return request.app.state.repository_factory()


def get_controller(
    request: Request,
    repository: ReviewRepository = Depends(get_repository),
) -> BookReviewsController:
    return BookReviewsController(
        repository,
        resource_root=request.app.state.settings.api.resource_root,
    )


# ── Routes ─────────────────────────────────────────────────────────

def list_reviews(controller: BookReviewsController = Depends(get_controller)):
    return controller.list_reviews()


def review_summary(controller: BookReviewsController = Depends(get_controller)):
    return controller.summary()


def get_review(review_id: int, controller: BookReviewsController = Depends(get_controller)):
    return controller.get_review(review_id)


def create_review(
    payload: BookReviewCreate,
    controller: BookReviewsController = Depends(get_controller),
):
    return controller.create_review(payload)


def build_router(resource_root: str) -> APIRouter:
    """
    Register the review routes under `resource_root`.

    An empty root serves the collection at "/".
    """
    router = APIRouter(tags=["BookReviews"])
    collection = resource_root or "/"

    router.add_api_route(collection, list_reviews, methods=["GET"], response_model=List[BookReviewOut])
    # Registered before /{review_id} so "summary" is never parsed as an id.
    router.add_api_route(
        f"{resource_root}/summary", review_summary, methods=["GET"],
        response_model=List[ReviewSummaryOut],
    )
    router.add_api_route(
        f"{resource_root}/{{review_id}}", get_review, methods=["GET"],
        response_model=BookReviewOut,
        responses={status.HTTP_404_NOT_FOUND: {"description": "No review with that id"}},
    )
    router.add_api_route(
        collection, create_review, methods=["POST"],
        response_model=BookReviewOut, status_code=status.HTTP_201_CREATED,
    )
    return router


# ── App factory ────────────────────────────────────────────────────

def create_app(
    repository_factory: Optional[RepositoryFactory] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Build the API application.

    Without a `repository_factory` every request gets a SQLiteReviewRepository
    on the configured database file, and the schema is created at startup.
    """
    settings = settings or get_settings()
    use_sqlite = repository_factory is None
    if use_sqlite:
        repository_factory = partial(SQLiteReviewRepository, settings.database.path)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        for issue in settings.validate():
            logger.warning(issue)
        if use_sqlite:
            init_database(settings.database.path)
            logger.info("Database ready")
        yield

    app = FastAPI(
        title="Book Reviews",
        description="Book review collection and per-title rating summaries",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.repository_factory = repository_factory
    app.include_router(build_router(settings.api.resource_root))
    return app


app = create_app()
