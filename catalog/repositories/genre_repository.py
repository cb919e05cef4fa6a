"""
Repository for Genre entity with name lookups and in-place renames.

Example:
    ```python
    from catalog.repositories.genre_repository import GenreRepository
    from catalog.storage.db import async_session

    async with async_session() as session:
        repo = GenreRepository(session)
        genres = await repo.get_all()
        fantasy = await repo.get_by_name("Fantasy")
    ```
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.logging import logger
from catalog.models.genre import Genre
from catalog.repositories.base import BaseRepository


class GenreRepository(BaseRepository[Genre]):
    """
    Repository for Genre entity operations.

    Provides CRUD operations inherited from BaseRepository plus
    Genre-specific query methods.
    """

    def __init__(self, session: AsyncSession):
        super().__init__(session, Genre)

    async def get_by_name(self, name: str) -> Genre | None:
        """
        Get genre by exact, case-sensitive name match.

        Args:
            name: Genre name to look for.

        Returns:
            The first matching genre, None if there is none.
        """
        try:
            stmt = select(Genre).where(Genre.name == name)
            result = await self.session.exec(stmt)
            return result.first()
        except SQLAlchemyError as e:
            logger.error(f"Error retrieving Genre by name: {e}")
            raise

    async def update_name(self, genre_id: int, name: str) -> int:
        """
        Replace the name of the genre with the given id.

        Issues a single unconditional ``UPDATE ... WHERE id = :id``; the row
        is not read first.

        Args:
            genre_id: Primary key of the genre to rename.
            name: New genre name.

        Returns:
            Number of rows updated, 0 when no genre has that id. A miss
            is not an error.

        Raises:
            SQLAlchemyError: If database operation fails.
        """
        try:
            stmt = update(Genre).where(Genre.id == genre_id).values(name=name)
            result = await self.session.exec(stmt)
            await self.session.commit()
            return result.rowcount
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error renaming Genre {genre_id}: {e}")
            raise
