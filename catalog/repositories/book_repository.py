"""Repository for Book entity, read-only from the catalog's point of view."""

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.logging import logger
from catalog.models.book import Book, BookGenreLink
from catalog.repositories.base import BaseRepository


class BookRepository(BaseRepository[Book]):
    """Repository for Book entity operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, Book)

    async def get_by_genre(self, genre_id: int) -> list[Book]:
        """
        Get every book filed under a genre.

        Args:
            genre_id: Primary key of the genre.

        Returns:
            Books linked to the genre, possibly empty. The genre itself is
            not required to exist.
        """
        try:
            stmt = (
                select(Book)
                .join(BookGenreLink, BookGenreLink.book_id == Book.id)
                .where(BookGenreLink.genre_id == genre_id)
            )
            result = await self.session.exec(stmt)
            return list(result.all())
        except SQLAlchemyError as e:
            logger.error(f"Error retrieving books of genre {genre_id}: {e}")
            raise
