"""PostgreSQL implementation of Post repository."""

from typing import Optional

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from bookclub.domain.model import Post
from bookclub.domain.repository import PostRepository
from bookclub.domain.value import PostId
from bookclub.persistence.mappers import post_to_dict, row_to_post
from bookclub.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_post(dict(row)) if row else None

    async def exists(self, post_id: PostId) -> bool:
        """Check whether a post exists without loading it."""
        stmt = select(exists().where(posts_table.c.id == post_id))
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        post_dict = post_to_dict(post)

        if await self.exists(post.id):
            stmt = (
                posts_table.update()
                .where(posts_table.c.id == post.id)
                .values(**post_dict)
            )
        else:
            stmt = posts_table.insert().values(**post_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return post
