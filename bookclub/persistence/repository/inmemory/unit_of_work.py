"""In-memory unit of work for testing."""

from bookclub.domain.repository import UnitOfWork

from .database import InMemoryDatabase


class InMemoryUnitOfWork(UnitOfWork):
    """In-memory writes are visible immediately; commits are only counted."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self._db = db

    async def commit(self) -> None:
        self._db.commits += 1
