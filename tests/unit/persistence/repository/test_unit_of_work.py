"""Unit tests for the unit of work implementations."""

import pytest

from bookclub.persistence.repository import PostgresUnitOfWork
from bookclub.persistence.repository.inmemory import (
    InMemoryDatabase,
    InMemoryUnitOfWork,
)


class FakeSession:
    """Stands in for an AsyncSession."""

    def __init__(self) -> None:
        self.commits = 0

    async def commit(self) -> None:
        self.commits += 1


class TestPostgresUnitOfWork:
    """Tests for PostgresUnitOfWork."""

    @pytest.mark.asyncio
    async def test_commit_commits_the_request_session(self):
        session = FakeSession()
        unit_of_work = PostgresUnitOfWork(session)

        await unit_of_work.commit()

        assert session.commits == 1


class TestInMemoryUnitOfWork:
    """Tests for InMemoryUnitOfWork."""

    @pytest.mark.asyncio
    async def test_commit_is_counted(self):
        db = InMemoryDatabase()
        unit_of_work = InMemoryUnitOfWork(db)

        await unit_of_work.commit()
        await unit_of_work.commit()

        assert db.commits == 2
