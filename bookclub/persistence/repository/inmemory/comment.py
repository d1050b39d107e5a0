"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional, Sequence

from bookclub.domain.model.comment import Comment
from bookclub.domain.repository.comment import CommentRepository
from bookclub.domain.value import CommentId, PostId, UserId

from .database import InMemoryDatabase


def _oldest_first(comments: list[Comment]) -> list[Comment]:
    return sorted(comments, key=lambda c: (c.created_at, c.id))


def _newest_first(comments: list[Comment]) -> list[Comment]:
    # Newest first, ties still broken by ascending ID
    by_id = sorted(comments, key=lambda c: c.id)
    return sorted(by_id, key=lambda c: c.created_at, reverse=True)


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self._db = db

    @property
    def _comments(self) -> dict[CommentId, Comment]:
        return self._db.comments

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_children(self, parent_id: CommentId) -> list[Comment]:
        """Find direct replies, oldest first."""
        return _oldest_first(
            [c for c in self._comments.values() if c.parent_id == parent_id]
        )

    async def find_child_ids(self, parent_ids: Sequence[CommentId]) -> list[CommentId]:
        """Find IDs of the direct replies of several comments."""
        parents = set(parent_ids)
        return [c.id for c in self._comments.values() if c.parent_id in parents]

    async def count_children(self, parent_id: CommentId) -> int:
        """Count direct replies of a comment."""
        return sum(1 for c in self._comments.values() if c.parent_id == parent_id)

    def _top_level(self, post_id: PostId) -> list[Comment]:
        return [
            c
            for c in self._comments.values()
            if c.post_id == post_id and c.parent_id is None
        ]

    async def find_top_level_by_post(
        self,
        post_id: PostId,
        limit: int,
        offset: int,
    ) -> list[Comment]:
        """Find one page of a post's top-level comments, newest first."""
        return _newest_first(self._top_level(post_id))[offset : offset + limit]

    async def count_top_level_by_post(self, post_id: PostId) -> int:
        """Count top-level comments of a post."""
        return len(self._top_level(post_id))

    async def find_by_author(
        self,
        author_id: UserId,
        limit: int,
        offset: int,
    ) -> list[Comment]:
        """Find one page of a user's comments, newest first."""
        comments = [c for c in self._comments.values() if c.author_id == author_id]
        return _newest_first(comments)[offset : offset + limit]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count a user's comments."""
        return sum(1 for c in self._comments.values() if c.author_id == author_id)

    async def add(self, comment: Comment) -> Optional[Comment]:
        """Insert a comment."""
        if comment.id in self._comments:
            return None
        self._comments[comment.id] = comment
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str, modified_at: datetime
    ) -> Optional[Comment]:
        """Replace the content of a comment."""
        comment = self._comments.get(comment_id)
        if not comment:
            return None
        updated = comment.model_copy(
            update={"content": content, "modified_at": modified_at}
        )
        self._comments[comment_id] = updated
        return updated

    async def delete_many(self, comment_ids: Sequence[CommentId]) -> int:
        """Hard delete comments."""
        deleted = 0
        for comment_id in set(comment_ids):
            if self._comments.pop(comment_id, None) is not None:
                deleted += 1
        return deleted
