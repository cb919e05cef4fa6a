from datetime import date

from sqlmodel import Field

from catalog.constants import AUTHOR_NAME_MAX_LENGTH, CATALOG_URL_PREFIX
from catalog.models.base import BaseModel


def format_medium_date(value: date | None) -> str:
    """
    Format a date in the medium style used by the catalog pages.

    Args:
        value: Date to format, may be missing.

    Returns:
        String like "Jan 1, 1900", or "" when value is None.
    """
    if value is None:
        return ""
    return f"{value:%b} {value.day}, {value.year}"


class Author(BaseModel, table=True):
    """
    SQLModel representing an author entity in the database.

    Only the name parts and the two optional dates are stored. The display
    fields below are computed on every access and never persisted.

    Attributes:
        id: Primary key identifier for the author
        first_name: Given name
        family_name: Family name
        date_of_birth: Optional date of birth
        date_of_death: Optional date of death
    """

    __table_args__ = {"extend_existing": True}

    id: int | None = Field(default=None, primary_key=True)
    first_name: str = Field(max_length=AUTHOR_NAME_MAX_LENGTH)
    family_name: str = Field(max_length=AUTHOR_NAME_MAX_LENGTH)
    date_of_birth: date | None = None
    date_of_death: date | None = None

    @property
    def name(self) -> str:
        """Full display name, family name first."""
        return f"{self.family_name}, {self.first_name}"

    @property
    def lifespan(self) -> int | None:
        """Years between birth and death, None unless both are known."""
        if self.date_of_birth is None or self.date_of_death is None:
            return None
        return self.date_of_death.year - self.date_of_birth.year

    @property
    def date_of_birth_formatted(self) -> str:
        return format_medium_date(self.date_of_birth)

    @property
    def date_of_death_formatted(self) -> str:
        return format_medium_date(self.date_of_death)

    @property
    def lifespan_formatted(self) -> str:
        """Birth and death dates joined by an en dash, or whatever is known."""
        if self.date_of_birth and self.date_of_death:
            return (
                f"{self.date_of_birth_formatted} – "
                f"{self.date_of_death_formatted}"
            )
        if self.date_of_birth:
            return self.date_of_birth_formatted
        return ""

    @property
    def url(self) -> str:
        return f"{CATALOG_URL_PREFIX}/author/{self.id}"
