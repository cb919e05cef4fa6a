"""
Base model for all catalog tables with async relationship support.

Combines SQLModel with SQLAlchemy's AsyncAttrs mixin so lazy-loaded
relationships can be reached through ``awaitable_attrs`` inside async
request handlers instead of raising MissingGreenlet.

Example:
    class Genre(BaseModel, table=True):
        id: int | None = Field(default=None, primary_key=True)
        name: str

    async with async_session() as session:
        genre = await session.get(Genre, 1)
        books = await genre.awaitable_attrs.books
"""

from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlmodel import SQLModel


class BaseModel(SQLModel, AsyncAttrs):  # type: ignore[misc]
    """Base class of every catalog table model."""

    pass
