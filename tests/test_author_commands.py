"""Tests for Author commands."""

import pytest

from catalog.commands.author_commands import GetAuthorCommand, GetAuthorsCommand
from catalog.exceptions import NotFoundError
from tests.conftest import create_author_fixture
from tests.mocks.repository_mocks import create_mock_author_repository


class TestGetAuthorsCommand:
    @pytest.mark.asyncio
    async def test_returns_sorted_authors(self):
        repo = create_mock_author_repository()
        repo.get_all_sorted.return_value = [
            create_author_fixture(id=2, family_name="Asimov"),
            create_author_fixture(id=1, family_name="Rothfuss"),
        ]

        result = await GetAuthorsCommand(repo).execute()

        assert [a.id for a in result] == [2, 1]
        repo.get_all_sorted.assert_called_once_with()


class TestGetAuthorCommand:
    @pytest.mark.asyncio
    async def test_found(self):
        repo = create_mock_author_repository()
        repo.get_by_id.return_value = create_author_fixture(id=3)

        author = await GetAuthorCommand(repo).execute(3)

        assert author.id == 3

    @pytest.mark.asyncio
    async def test_missing_raises_not_found(self):
        repo = create_mock_author_repository()

        with pytest.raises(NotFoundError, match="Author not found"):
            await GetAuthorCommand(repo).execute(3)
