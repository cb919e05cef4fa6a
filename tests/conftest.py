"""
Pytest configuration and fixtures for testing.

This module provides shared fixtures for database sessions, in-memory
repositories and a minimal FastAPI app with the catalog routers.
"""

import os
from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest

# Set required environment variables for testing before importing catalog modules
os.environ.setdefault("DB_USER", "test-user")
os.environ.setdefault("DB_PASSWORD", "test-password")


@pytest.fixture
def mock_session():
    """
    Provides a mock AsyncSession for testing.

    Returns:
        AsyncMock: Mocked database session
    """
    from sqlmodel.ext.asyncio.session import AsyncSession

    session = AsyncMock(spec=AsyncSession)
    session.add = MagicMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.refresh = AsyncMock()
    session.rollback = AsyncMock()
    session.exec = AsyncMock()
    session.get = AsyncMock()
    session.delete = AsyncMock()
    return session


@pytest.fixture
def catalog_db():
    """
    Provides an empty in-memory catalog store.

    Returns:
        InMemoryCatalog: Store shared by the fake repositories
    """
    from tests.mocks.repository_mocks import InMemoryCatalog

    return InMemoryCatalog()


@pytest.fixture
def app(catalog_db):
    """
    Create a minimal FastAPI app with the catalog routers.

    Repository dependencies are overridden with in-memory fakes sharing
    ``catalog_db``, so no database is needed.

    Args:
        catalog_db: In-memory store fixture.

    Returns:
        FastAPI: FastAPI application instance.
    """
    from fastapi import FastAPI

    from catalog.api.http.author import router as author_router
    from catalog.api.http.genre import router as genre_router
    from catalog.dependencies import (
        get_author_repository,
        get_book_repository,
        get_genre_repository,
    )
    from tests.mocks.repository_mocks import (
        FakeAuthorRepository,
        FakeBookRepository,
        FakeGenreRepository,
    )

    test_app = FastAPI()
    test_app.include_router(genre_router)
    test_app.include_router(author_router)

    test_app.dependency_overrides[get_genre_repository] = (
        lambda: FakeGenreRepository(catalog_db)
    )
    test_app.dependency_overrides[get_book_repository] = (
        lambda: FakeBookRepository(catalog_db)
    )
    test_app.dependency_overrides[get_author_repository] = (
        lambda: FakeAuthorRepository(catalog_db)
    )
    return test_app


@pytest.fixture
def client(app):
    """
    Create a test client that does not follow redirects.

    Args:
        app: FastAPI application fixture.

    Returns:
        TestClient: FastAPI test client instance.
    """
    from fastapi.testclient import TestClient

    return TestClient(app, follow_redirects=False)


# Fixture Factories
def create_genre_fixture(id: int = 1, name: str = "Fantasy"):
    """
    Factory function to create Genre instances for testing.

    Args:
        id: Genre ID
        name: Genre name

    Returns:
        Genre: Genre instance
    """
    from catalog.models.genre import Genre

    return Genre(id=id, name=name)


def create_book_fixture(id: int = 1, title: str = "The Name of the Wind"):
    """
    Factory function to create Book instances for testing.

    Args:
        id: Book ID
        title: Book title

    Returns:
        Book: Book instance
    """
    from catalog.models.book import Book

    return Book(id=id, title=title, summary="A summary", isbn="9780756404741")


def create_author_fixture(
    id: int = 1,
    first_name: str = "Patrick",
    family_name: str = "Rothfuss",
    date_of_birth: date | None = None,
    date_of_death: date | None = None,
):
    """
    Factory function to create Author instances for testing.

    Returns:
        Author: Author instance
    """
    from catalog.models.author import Author

    return Author(
        id=id,
        first_name=first_name,
        family_name=family_name,
        date_of_birth=date_of_birth,
        date_of_death=date_of_death,
    )
