"""Tests for database bootstrap and the per-request session dependency."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from sqlalchemy.exc import OperationalError

from catalog.storage.db import get_session, wait_and_init_db


def _engine(conn):
    engine = MagicMock()
    engine.begin.return_value.__aenter__.return_value = conn
    engine.begin.return_value.__aexit__.return_value = False
    return engine


def _unavailable():
    return OperationalError("CONNECT", {}, Exception("connection refused"))


class TestWaitAndInitDb:
    @pytest.mark.asyncio
    async def test_creates_tables_on_first_attempt(self):
        conn = AsyncMock()
        sleep = AsyncMock()

        with (
            patch("catalog.storage.db.engine", _engine(conn)),
            patch("catalog.storage.db.asyncio.sleep", sleep),
        ):
            await wait_and_init_db(retry_interval=1, max_retries=3)

        conn.run_sync.assert_awaited_once()
        sleep.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_retries_until_database_is_ready(self):
        conn = AsyncMock()
        conn.run_sync.side_effect = [_unavailable(), _unavailable(), None]
        sleep = AsyncMock()

        with (
            patch("catalog.storage.db.engine", _engine(conn)),
            patch("catalog.storage.db.asyncio.sleep", sleep),
        ):
            await wait_and_init_db(retry_interval=2, max_retries=5)

        assert conn.run_sync.await_count == 3
        assert sleep.await_count == 2
        sleep.assert_awaited_with(2)

    @pytest.mark.asyncio
    async def test_gives_up_after_max_retries(self):
        conn = AsyncMock()
        conn.run_sync.side_effect = _unavailable()

        with (
            patch("catalog.storage.db.engine", _engine(conn)),
            patch("catalog.storage.db.asyncio.sleep", AsyncMock()),
        ):
            with pytest.raises(RuntimeError):
                await wait_and_init_db(retry_interval=0, max_retries=3)

        assert conn.run_sync.await_count == 3


class TestGetSession:
    @staticmethod
    def _factory(session):
        factory = MagicMock()
        factory.return_value.__aenter__.return_value = session
        factory.return_value.__aexit__.return_value = False
        return factory

    @pytest.mark.asyncio
    async def test_commits_when_request_finishes(self):
        session = AsyncMock()

        with patch("catalog.storage.db.async_session", self._factory(session)):
            gen = get_session()
            assert await gen.__anext__() is session
            with pytest.raises(StopAsyncIteration):
                await gen.__anext__()

        session.commit.assert_awaited_once()
        session.rollback.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_rolls_back_and_reraises_on_database_error(self):
        session = AsyncMock()

        with patch("catalog.storage.db.async_session", self._factory(session)):
            gen = get_session()
            await gen.__anext__()
            with pytest.raises(OperationalError):
                await gen.athrow(_unavailable())

        session.rollback.assert_awaited_once()
        session.commit.assert_not_awaited()
