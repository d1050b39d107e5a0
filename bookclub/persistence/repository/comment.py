"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional, Sequence

from sqlalchemy import delete, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from bookclub.domain.model import Comment
from bookclub.domain.repository import CommentRepository
from bookclub.domain.value import CommentId, PostId, UserId
from bookclub.persistence.mappers import comment_to_dict, row_to_comment
from bookclub.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_all(self, stmt) -> List[Comment]:
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def _count(self, *criteria) -> int:
        stmt = select(func.count()).select_from(comments_table).where(*criteria)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def find_children(self, parent_id: CommentId) -> List[Comment]:
        """Find direct replies, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_id == parent_id)
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        return await self._fetch_all(stmt)

    async def find_child_ids(self, parent_ids: Sequence[CommentId]) -> List[CommentId]:
        """Find IDs of the direct replies of several comments at once."""
        if not parent_ids:
            return []

        stmt = select(comments_table.c.id).where(
            comments_table.c.parent_id.in_(list(parent_ids))
        )
        result = await self.session.execute(stmt)
        return [CommentId(row) for row in result.scalars().all()]

    async def count_children(self, parent_id: CommentId) -> int:
        """Count direct replies of a comment."""
        return await self._count(comments_table.c.parent_id == parent_id)

    async def find_top_level_by_post(
        self,
        post_id: PostId,
        limit: int,
        offset: int,
    ) -> List[Comment]:
        """Find one page of a post's top-level comments, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .where(comments_table.c.parent_id.is_(None))
            .order_by(desc(comments_table.c.created_at), comments_table.c.id)
            .limit(limit)
            .offset(offset)
        )
        return await self._fetch_all(stmt)

    async def count_top_level_by_post(self, post_id: PostId) -> int:
        """Count top-level comments of a post."""
        return await self._count(
            comments_table.c.post_id == post_id,
            comments_table.c.parent_id.is_(None),
        )

    async def find_by_author(
        self,
        author_id: UserId,
        limit: int,
        offset: int,
    ) -> List[Comment]:
        """Find one page of a user's comments, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.author_id == author_id)
            .order_by(desc(comments_table.c.created_at), comments_table.c.id)
            .limit(limit)
            .offset(offset)
        )
        return await self._fetch_all(stmt)

    async def count_by_author(self, author_id: UserId) -> int:
        """Count a user's comments."""
        return await self._count(comments_table.c.author_id == author_id)

    async def add(self, comment: Comment) -> Optional[Comment]:
        """Insert a comment and read it back."""
        stmt = (
            insert(comments_table)
            .values(**comment_to_dict(comment))
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_comment(dict(row)) if row else None

    async def update_content(
        self, comment_id: CommentId, content: str, modified_at: datetime
    ) -> Optional[Comment]:
        """Replace the content of a comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(content=content, modified_at=modified_at)
            .returning(comments_table)
        )

        result = await self.session.execute(stmt)
        row = result.mappings().first()

        if row is None:
            # Comment removed since it was loaded
            return None

        await self.session.flush()
        return row_to_comment(dict(row))

    async def delete_many(self, comment_ids: Sequence[CommentId]) -> int:
        """Hard delete comments in a single statement."""
        if not comment_ids:
            return 0

        stmt = delete(comments_table).where(comments_table.c.id.in_(list(comment_ids)))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
