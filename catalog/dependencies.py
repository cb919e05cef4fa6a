"""
Dependency injection configuration for FastAPI.

Every repository gets its own database session (``use_cache=False``) so
that the concurrent genre/book reads of a request never share one
AsyncSession. Tests replace the ``get_*_repository`` providers through
``app.dependency_overrides``.

Example:
    ```python
    @router.get("/genre/{genre_id}")
    async def genre_detail(
        genre_id: int, genre_repo: GenreRepoDep, book_repo: BookRepoDep
    ) -> HTMLResponse:
        ...
    ```
"""

from typing import Annotated

from fastapi import Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.repositories.author_repository import AuthorRepository
from catalog.repositories.book_repository import BookRepository
from catalog.repositories.genre_repository import GenreRepository
from catalog.storage.db import get_session

# ============================================================================
# Database Session Dependencies
# ============================================================================

SessionDep = Annotated[AsyncSession, Depends(get_session, use_cache=False)]


# ============================================================================
# Repository Dependencies
# ============================================================================


def get_genre_repository(session: SessionDep) -> GenreRepository:
    """
    Get genre repository with its own database session.

    Args:
        session: Database session injected by FastAPI.

    Returns:
        GenreRepository instance with session.
    """
    return GenreRepository(session)


def get_book_repository(session: SessionDep) -> BookRepository:
    """
    Get book repository with its own database session.

    Args:
        session: Database session injected by FastAPI.

    Returns:
        BookRepository instance with session.
    """
    return BookRepository(session)


def get_author_repository(session: SessionDep) -> AuthorRepository:
    return AuthorRepository(session)


GenreRepoDep = Annotated[GenreRepository, Depends(get_genre_repository)]
BookRepoDep = Annotated[BookRepository, Depends(get_book_repository)]
AuthorRepoDep = Annotated[AuthorRepository, Depends(get_author_repository)]
