"""
Base command for encapsulating business operations.

Commands hold the catalog's business rules (duplicate checks, delete
guards, not-found handling) as objects that depend only on repositories,
which keeps HTTP handlers thin and the rules testable with mocks.

Example:
    ```python
    class GetGenreCommand(BaseCommand[int, Genre]):
        def __init__(self, repository: GenreRepository):
            self.repository = repository

        async def execute(self, genre_id: int) -> Genre:
            genre = await self.repository.get_by_id(genre_id)
            if genre is None:
                raise NotFoundError("Genre not found")
            return genre


    @router.get("/genre/{genre_id}/update")
    async def genre_update_get(genre_id: int, repo: GenreRepoDep):
        genre = await GetGenreCommand(repo).execute(genre_id)
        ...
    ```
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

TInput = TypeVar("TInput")
TOutput = TypeVar("TOutput")


class BaseCommand(ABC, Generic[TInput, TOutput]):
    """
    Base command for business operations.

    Type Parameters:
        TInput: Input data type (usually a Pydantic model or an id).
        TOutput: Output data type.
    """

    @abstractmethod
    async def execute(self, input_data: TInput) -> TOutput:
        """
        Execute the command.

        Args:
            input_data: Input data for the command.

        Returns:
            Result of the command execution.

        Raises:
            AppException: For business rule failures such as NotFoundError.
            SQLAlchemyError: Store failures propagate unchanged.
        """
        pass
