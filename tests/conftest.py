"""Shared pytest fixtures for the book reviews tests."""

from pathlib import Path
from unittest.mock import create_autospec

import pytest
from fastapi.testclient import TestClient

from book_reviews.domain import BookReview
from book_reviews.infrastructure.config import ApiSettings, DatabaseSettings, Settings
from book_reviews.infrastructure.persistence import (
    InMemoryReviewRepository,
    ReviewRepository,
    SQLiteReviewRepository,
)
from book_reviews.web.app import create_app


@pytest.fixture
def two_reviews() -> list[BookReview]:
    return [
        BookReview(id=1, title="A", rating=2),
        BookReview(id=2, title="B", rating=3),
    ]


@pytest.fixture
def summary_reviews() -> list[BookReview]:
    return [
        BookReview(id=1, title="A", rating=1),
        BookReview(id=2, title="B", rating=2),
        BookReview(id=3, title="C", rating=5),
        BookReview(id=4, title="B", rating=4),
    ]


@pytest.fixture
def repository_mock():
    """Autospecced ReviewRepository with an empty review view."""
    mock = create_autospec(ReviewRepository, instance=True)
    mock.all_reviews = []
    return mock


@pytest.fixture
def db_path(tmp_path: Path) -> str:
    return str(tmp_path / "reviews.db")


@pytest.fixture
def test_settings(db_path: str) -> Settings:
    return Settings(
        database=DatabaseSettings(path=db_path),
        api=ApiSettings(resource_root="/BookReviews"),
    )


@pytest.fixture
def mock_client(repository_mock, test_settings):
    """HTTP client whose every request is served by `repository_mock`."""
    app = create_app(repository_factory=lambda: repository_mock, settings=test_settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def memory_repository() -> InMemoryReviewRepository:
    return InMemoryReviewRepository()


@pytest.fixture
def memory_client(memory_repository, test_settings):
    app = create_app(repository_factory=lambda: memory_repository, settings=test_settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def sqlite_client(test_settings):
    """HTTP client backed by a real SQLite file, schema created by the app lifespan."""
    app = create_app(settings=test_settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def sqlite_repository(db_path: str) -> SQLiteReviewRepository:
    repository = SQLiteReviewRepository(db_path)
    repository.init()
    return repository
