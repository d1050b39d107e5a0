"""PostgreSQL implementation of UnitOfWork."""

from sqlalchemy.ext.asyncio import AsyncSession

from bookclub.domain.repository import UnitOfWork


class PostgresUnitOfWork(UnitOfWork):
    """Commits the request's session.

    The session begins a new transaction on its next statement, so the
    request can keep writing after a commit.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def commit(self) -> None:
        await self.session.commit()
