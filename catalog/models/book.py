from typing import TYPE_CHECKING, Optional

from sqlmodel import Field, Relationship

from catalog.constants import CATALOG_URL_PREFIX
from catalog.models.base import BaseModel

if TYPE_CHECKING:
    from catalog.models.author import Author
    from catalog.models.genre import Genre


class BookGenreLink(BaseModel, table=True):
    """Association between books and the genres they are filed under."""

    __table_args__ = {"extend_existing": True}

    book_id: int | None = Field(
        default=None, foreign_key="book.id", primary_key=True
    )
    genre_id: int | None = Field(
        default=None, foreign_key="genre.id", primary_key=True
    )


class Book(BaseModel, table=True):
    """
    SQLModel representing a book.

    Books are read-only for this application: genre pages list them and
    genre deletion is refused while any book still references the genre.
    """

    __table_args__ = {"extend_existing": True}

    id: int | None = Field(default=None, primary_key=True)
    title: str
    summary: str = ""
    isbn: str = ""
    author_id: int | None = Field(default=None, foreign_key="author.id")

    author: Optional["Author"] = Relationship()
    genres: list["Genre"] = Relationship(
        back_populates="books", link_model=BookGenreLink
    )

    @property
    def url(self) -> str:
        return f"{CATALOG_URL_PREFIX}/book/{self.id}"
