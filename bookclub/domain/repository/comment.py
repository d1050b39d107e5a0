"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Sequence

from bookclub.domain.model.comment import Comment
from bookclub.domain.value import CommentId, PostId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Comments are stored as a flat adjacency list keyed by ``parent_id``;
    tree shaping happens in the domain service.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_children(self, parent_id: CommentId) -> List[Comment]:
        """Find direct replies of a comment, oldest first.

        Args:
            parent_id: The parent comment ID

        Returns:
            List of child comments ordered by creation time, then ID
        """
        pass

    @abstractmethod
    async def find_child_ids(self, parent_ids: Sequence[CommentId]) -> List[CommentId]:
        """Find the IDs of all direct replies of several comments.

        Args:
            parent_ids: Parent comment IDs

        Returns:
            IDs of comments whose parent is one of ``parent_ids``
        """
        pass

    @abstractmethod
    async def count_children(self, parent_id: CommentId) -> int:
        """Count direct replies of a comment.

        Args:
            parent_id: The parent comment ID

        Returns:
            Number of direct children
        """
        pass

    @abstractmethod
    async def find_top_level_by_post(
        self,
        post_id: PostId,
        limit: int,
        offset: int,
    ) -> List[Comment]:
        """Find top-level comments of a post, newest first.

        Args:
            post_id: The post ID
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            List of comments without a parent
        """
        pass

    @abstractmethod
    async def count_top_level_by_post(self, post_id: PostId) -> int:
        """Count top-level comments of a post.

        Args:
            post_id: The post ID

        Returns:
            Number of comments without a parent
        """
        pass

    @abstractmethod
    async def find_by_author(
        self,
        author_id: UserId,
        limit: int,
        offset: int,
    ) -> List[Comment]:
        """Find comments by a specific author, newest first.

        Args:
            author_id: The author's user ID
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            List of comments by the author
        """
        pass

    @abstractmethod
    async def count_by_author(self, author_id: UserId) -> int:
        """Count comments by a specific author.

        Args:
            author_id: The author's user ID

        Returns:
            Number of comments
        """
        pass

    @abstractmethod
    async def add(self, comment: Comment) -> Optional[Comment]:
        """Insert a new comment.

        Args:
            comment: The comment to insert

        Returns:
            The stored comment, or None if no row was written
        """
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str, modified_at: datetime
    ) -> Optional[Comment]:
        """Replace the content of a comment and stamp the modification time.

        Args:
            comment_id: The comment ID
            content: New content
            modified_at: Modification timestamp

        Returns:
            The updated comment, or None if no row was updated
        """
        pass

    @abstractmethod
    async def delete_many(self, comment_ids: Sequence[CommentId]) -> int:
        """Hard delete comments.

        Args:
            comment_ids: IDs of the comments to delete

        Returns:
            Number of rows deleted
        """
        pass
