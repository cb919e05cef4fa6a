"""
Commands for Genre business operations.

Detail and delete pages need the genre together with the books filed under
it. Those two reads are independent, so they run concurrently on separate
repositories (and separate sessions) inside an asyncio.TaskGroup and are
joined before any decision is taken. If either read fails the other is
cancelled and the whole command fails with that error.

Example:
    ```python
    from catalog.commands.genre_commands import GetGenreDetailCommand


    @router.get("/genre/{genre_id}")
    async def genre_detail(
        genre_id: int, genre_repo: GenreRepoDep, book_repo: BookRepoDep
    ):
        detail = await GetGenreDetailCommand(genre_repo, book_repo).execute(
            genre_id
        )
        ...
    ```
"""

import asyncio
from enum import Enum

from pydantic import BaseModel, Field

from catalog.commands.base import BaseCommand
from catalog.exceptions import NotFoundError
from catalog.logging import logger
from catalog.models.book import Book
from catalog.models.genre import Genre
from catalog.repositories.book_repository import BookRepository
from catalog.repositories.genre_repository import GenreRepository

GENRE_NOT_FOUND_MSG = "Genre not found"


# ============================================================================
# Input/Output Models
# ============================================================================


class CreateGenreInput(BaseModel):  # type: ignore[misc]
    """Input model for creating a genre; name is already sanitized."""

    name: str = Field(..., min_length=1, description="Genre name")


class UpdateGenreInput(BaseModel):  # type: ignore[misc]
    """Input model for renaming a genre; name is already sanitized."""

    id: int = Field(..., description="Genre ID to update")
    name: str = Field(..., min_length=1, description="New genre name")


class GenreWithBooks(BaseModel):  # type: ignore[misc]
    """A genre lookup joined with the books referencing the same id."""

    genre: Genre | None = None
    books: list[Book] = Field(default_factory=list)


class CreateGenreResult(BaseModel):  # type: ignore[misc]
    """Genre to redirect to, and whether it was inserted by this call."""

    genre: Genre
    created: bool


class DeleteOutcome(str, Enum):
    DELETED = "deleted"
    MISSING = "missing"
    BLOCKED = "blocked"


class DeleteGenreResult(BaseModel):  # type: ignore[misc]
    """Outcome of a delete attempt plus the state shown on conflict."""

    outcome: DeleteOutcome
    genre: Genre | None = None
    books: list[Book] = Field(default_factory=list)


async def fetch_genre_with_books(
    genre_repo: GenreRepository,
    book_repo: BookRepository,
    genre_id: int,
) -> GenreWithBooks:
    """
    Look up a genre and its books concurrently.

    Args:
        genre_repo: Repository used for the genre lookup.
        book_repo: Repository used for the book lookup. Must not share a
            session with genre_repo.
        genre_id: Genre primary key.

    Returns:
        GenreWithBooks, where genre is None when the id does not resolve.

    Raises:
        The first error raised by either read. The other read is
        cancelled before its session is released.
    """
    try:
        async with asyncio.TaskGroup() as tg:
            genre_task = tg.create_task(genre_repo.get_by_id(genre_id))
            books_task = tg.create_task(book_repo.get_by_genre(genre_id))
    except ExceptionGroup as eg:
        raise eg.exceptions[0] from None

    return GenreWithBooks(genre=genre_task.result(), books=books_task.result())


# ============================================================================
# Commands
# ============================================================================


class GetGenresCommand(BaseCommand[None, list[Genre]]):
    """Command to list every genre in store order, no filter or paging."""

    def __init__(self, repository: GenreRepository):
        self.repository = repository

    async def execute(self, input_data: None = None) -> list[Genre]:
        return await self.repository.get_all()


class GetGenreCommand(BaseCommand[int, Genre]):
    """Command to load a single genre or fail with NotFoundError."""

    def __init__(self, repository: GenreRepository):
        self.repository = repository

    async def execute(self, genre_id: int) -> Genre:
        """
        Execute command to get one genre.

        Args:
            genre_id: Genre primary key.

        Returns:
            The genre.

        Raises:
            NotFoundError: If no genre has that id.
        """
        genre = await self.repository.get_by_id(genre_id)
        if genre is None:
            raise NotFoundError(GENRE_NOT_FOUND_MSG)
        return genre


class GetGenreDetailCommand(BaseCommand[int, GenreWithBooks]):
    """
    Command to load a genre with the books filed under it.

    A missing genre is reported as NotFoundError even if books still
    reference the id.
    """

    def __init__(
        self, genre_repository: GenreRepository, book_repository: BookRepository
    ):
        self.genre_repository = genre_repository
        self.book_repository = book_repository

    async def execute(self, genre_id: int) -> GenreWithBooks:
        """
        Execute command to get genre detail.

        Args:
            genre_id: Genre primary key.

        Returns:
            The genre and its books.

        Raises:
            NotFoundError: If no genre has that id.
        """
        detail = await fetch_genre_with_books(
            self.genre_repository, self.book_repository, genre_id
        )
        if detail.genre is None:
            raise NotFoundError(GENRE_NOT_FOUND_MSG)
        return detail


class GetGenreDeleteInfoCommand(BaseCommand[int, GenreWithBooks | None]):
    """
    Command to load what the delete confirmation page shows.

    Returns None for an unknown id so the caller can redirect to the
    collection instead of rendering an empty confirmation.
    """

    def __init__(
        self, genre_repository: GenreRepository, book_repository: BookRepository
    ):
        self.genre_repository = genre_repository
        self.book_repository = book_repository

    async def execute(self, genre_id: int) -> GenreWithBooks | None:
        detail = await fetch_genre_with_books(
            self.genre_repository, self.book_repository, genre_id
        )
        if detail.genre is None:
            return None
        return detail


class CreateGenreCommand(BaseCommand[CreateGenreInput, CreateGenreResult]):
    """
    Command to create a genre, idempotent by exact name.

    Submitting a name that already exists returns the existing genre and
    inserts nothing. The lookup and the insert are separate statements, so
    two concurrent identical submissions can both insert.
    """

    def __init__(self, repository: GenreRepository):
        self.repository = repository

    async def execute(self, input_data: CreateGenreInput) -> CreateGenreResult:
        """
        Execute command to create genre.

        Args:
            input_data: Sanitized genre name.

        Returns:
            The existing or newly created genre and a created flag.

        Example:
            ```python
            result = await command.execute(CreateGenreInput(name="Fantasy"))
            redirect_to(result.genre.url)
            ```
        """
        existing = await self.repository.get_by_name(input_data.name)
        if existing:
            logger.info(
                f"Genre '{input_data.name}' already exists with id {existing.id}"
            )
            return CreateGenreResult(genre=existing, created=False)

        genre = await self.repository.create(Genre(name=input_data.name))
        logger.info(f"Created genre {genre.id}")
        return CreateGenreResult(genre=genre, created=True)


class DeleteGenreCommand(BaseCommand[int, DeleteGenreResult]):
    """
    Command to delete a genre that no book references.

    Deletion and the conflict report are mutually exclusive: when at least
    one book references the genre nothing is deleted and the result carries
    the genre and its books for the conflict page.
    """

    def __init__(
        self, genre_repository: GenreRepository, book_repository: BookRepository
    ):
        self.genre_repository = genre_repository
        self.book_repository = book_repository

    async def execute(self, genre_id: int) -> DeleteGenreResult:
        """
        Execute command to delete genre.

        Args:
            genre_id: Genre primary key.

        Returns:
            DeleteGenreResult with outcome DELETED, MISSING or BLOCKED.
        """
        detail = await fetch_genre_with_books(
            self.genre_repository, self.book_repository, genre_id
        )

        if detail.genre is None:
            return DeleteGenreResult(outcome=DeleteOutcome.MISSING)

        if detail.books:
            logger.info(
                f"Refusing to delete genre {genre_id}: referenced by "
                f"{len(detail.books)} book(s)"
            )
            return DeleteGenreResult(
                outcome=DeleteOutcome.BLOCKED,
                genre=detail.genre,
                books=detail.books,
            )

        await self.genre_repository.delete(detail.genre)
        logger.info(f"Deleted genre {genre_id}")
        return DeleteGenreResult(outcome=DeleteOutcome.DELETED)


class UpdateGenreCommand(BaseCommand[UpdateGenreInput, int]):
    """
    Command to rename a genre by id.

    The update is unconditional: a missing id is a silent no-op (logged)
    and the caller redirects to the collection either way.
    """

    def __init__(self, repository: GenreRepository):
        self.repository = repository

    async def execute(self, input_data: UpdateGenreInput) -> int:
        updated = await self.repository.update_name(
            input_data.id, input_data.name
        )
        if not updated:
            logger.warning(f"Update of missing genre {input_data.id} ignored")
        return updated
