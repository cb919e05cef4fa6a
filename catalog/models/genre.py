from typing import TYPE_CHECKING

from sqlmodel import Field, Relationship

from catalog.constants import CATALOG_URL_PREFIX, GENRE_NAME_MAX_LENGTH
from catalog.models.base import BaseModel
from catalog.models.book import BookGenreLink

if TYPE_CHECKING:
    from catalog.models.book import Book


class Genre(BaseModel, table=True):
    """
    SQLModel representing a genre of the catalog.

    Names are not unique at the storage level; the create flow checks for
    an existing genre with the same name before inserting, which leaves a
    race window between two concurrent identical submissions.

    Attributes:
        id: Primary key identifier, assigned by the store
        name: Display name, 3 to 100 characters
        books: Books filed under this genre
    """

    __table_args__ = {"extend_existing": True}

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=GENRE_NAME_MAX_LENGTH)

    books: list["Book"] = Relationship(
        back_populates="genres", link_model=BookGenreLink
    )

    @property
    def url(self) -> str:
        """Canonical location of the genre detail page."""
        return f"{CATALOG_URL_PREFIX}/genre/{self.id}"
