"""
Form validation for catalog entities.

Validation is a pure stage: it sanitizes the submitted value and collects
itemized errors without touching the store. Handlers branch on the result
and either re-render the form or go on to persist.

Example:
    ```python
    result = validate_genre_form(form_name)
    if not result.is_valid:
        return render_form(genre_name=result.value, errors=result.errors)
    await CreateGenreCommand(repo).execute(CreateGenreInput(name=result.value))
    ```
"""

import html
import re

from pydantic import BaseModel, Field

from catalog.constants import GENRE_NAME_MAX_LENGTH, GENRE_NAME_MIN_LENGTH

ALPHANUMERIC = re.compile(r"^[0-9A-Za-z]+$")
EXTRA_ESCAPES = str.maketrans({"/": "&#x2F;", "`": "&#96;"})

GENRE_NAME_REQUIRED_MSG = "Genre name required"
GENRE_NAME_UPDATE_REQUIRED_MSG = "You need to enter a name for Genre"
GENRE_NAME_LENGTH_MSG = (
    f"Genre name must be between {GENRE_NAME_MIN_LENGTH} and "
    f"{GENRE_NAME_MAX_LENGTH} characters"
)
GENRE_NAME_ALPHANUMERIC_MSG = "Your name must be alphanumeric"


class FieldError(BaseModel):  # type: ignore[misc]
    """One itemized validation error."""

    param: str = Field(..., description="Name of the offending form field")
    msg: str = Field(..., description="Message shown next to the form")
    value: str = Field(default="", description="Sanitized submitted value")


class FormValidation(BaseModel):  # type: ignore[misc]
    """Outcome of validating a submitted form field."""

    value: str = ""
    errors: list[FieldError] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def sanitize(raw: str | None) -> str:
    """
    Trim surrounding whitespace and HTML-escape a submitted value.

    Besides the characters handled by html.escape, "/" and "`" are encoded
    as well, so stored names match the catalog's existing data.
    """
    escaped = html.escape((raw or "").strip())
    return escaped.translate(EXTRA_ESCAPES)


def validate_genre_form(
    raw_name: str | None, *, alphanumeric: bool = False
) -> FormValidation:
    """
    Validate the name field of the genre form.

    The value is trimmed and HTML-escaped before any check, so the length
    and alphanumeric rules apply to what would be stored.

    Args:
        raw_name: Name as submitted, possibly missing.
        alphanumeric: Also require [A-Za-z0-9] only. Update submissions
            use this stricter rule; creation does not.

    Returns:
        FormValidation with the sanitized value and every failed rule.
    """
    value = sanitize(raw_name)
    errors: list[FieldError] = []

    def fail(msg: str) -> None:
        errors.append(FieldError(param="name", msg=msg, value=value))

    if not value:
        fail(
            GENRE_NAME_UPDATE_REQUIRED_MSG
            if alphanumeric
            else GENRE_NAME_REQUIRED_MSG
        )
    elif not GENRE_NAME_MIN_LENGTH <= len(value) <= GENRE_NAME_MAX_LENGTH:
        fail(GENRE_NAME_LENGTH_MSG)

    if alphanumeric and not ALPHANUMERIC.match(value):
        fail(GENRE_NAME_ALPHANUMERIC_MSG)

    return FormValidation(value=value, errors=errors)
