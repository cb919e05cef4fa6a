"""Commands for read-only Author pages."""

from catalog.commands.base import BaseCommand
from catalog.exceptions import NotFoundError
from catalog.models.author import Author
from catalog.repositories.author_repository import AuthorRepository


class GetAuthorsCommand(BaseCommand[None, list[Author]]):
    """Command to list authors ordered by family name."""

    def __init__(self, repository: AuthorRepository):
        self.repository = repository

    async def execute(self, input_data: None = None) -> list[Author]:
        return await self.repository.get_all_sorted()


class GetAuthorCommand(BaseCommand[int, Author]):
    """Command to load one author or fail with NotFoundError."""

    def __init__(self, repository: AuthorRepository):
        self.repository = repository

    async def execute(self, author_id: int) -> Author:
        author = await self.repository.get_by_id(author_id)
        if author is None:
            raise NotFoundError("Author not found")
        return author
