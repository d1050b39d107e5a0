"""Comment domain service."""

from collections import deque
from dataclasses import dataclass, field

import logfire

from bookclub.domain.error import (
    NotAuthorizedError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from bookclub.domain.model import Comment, User
from bookclub.domain.model.common import utcnow
from bookclub.domain.repository import (
    CommentRepository,
    PostRepository,
    UserRepository,
)
from bookclub.domain.value import (
    CommentId,
    Pagination,
    PostId,
    UserId,
    Username,
    new_id,
)

from .base import Service


@dataclass
class CommentNode:
    """A comment resolved for display.

    ``reply_count`` is the number of direct replies as counted by the
    store, independent of how many ``children`` were materialized.
    """

    comment: Comment
    author: User | None
    reply_count: int
    children: list["CommentNode"] = field(default_factory=list)


@dataclass
class CommentListing:
    """One page of top-level comments plus the totals for the listing."""

    items: list[CommentNode]
    count: int
    pages: int


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        user_repository: UserRepository,
        max_content_length: int = 10000,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository
            user_repository: User repository
            max_content_length: Longest accepted comment body
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository
        self.user_repository = user_repository
        self.max_content_length = max_content_length

    def _check_content(self, content: str) -> None:
        if not content or not content.strip():
            raise ValidationError("Comment content must not be empty")
        if len(content) > self.max_content_length:
            raise ValidationError(
                f"Comment content exceeds {self.max_content_length} characters"
            )

    async def create_comment(
        self,
        author_id: UserId,
        post_id: PostId,
        content: str,
        parent_id: str | None = None,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        A blank ``parent_id`` is treated as no parent.

        Args:
            author_id: Caller, recorded as the author
            post_id: Post being commented on
            content: Comment body
            parent_id: Parent comment ID for replies

        Returns:
            Stored comment

        Raises:
            ValidationError: If content is empty or too long, or the parent
                belongs to another post
            NotFoundError: If the post or the parent comment does not exist
            PersistenceError: If the insert stored nothing
        """
        parent = CommentId(parent_id) if parent_id and parent_id.strip() else None

        with logfire.span(
            "comment_service.create_comment",
            post_id=post_id,
            author_id=author_id,
            parent_id=parent,
        ):
            self._check_content(content)

            if not await self.post_repository.exists(post_id):
                logfire.warn("Post not found", post_id=post_id)
                raise NotFoundError("Post", post_id)

            if parent:
                parent_comment = await self.comment_repository.find_by_id(parent)
                if not parent_comment:
                    logfire.warn("Parent comment not found", parent_id=parent)
                    raise NotFoundError("Comment", parent)
                if parent_comment.post_id != post_id:
                    logfire.warn(
                        "Parent comment does not belong to post",
                        parent_id=parent,
                        parent_post_id=parent_comment.post_id,
                        target_post_id=post_id,
                    )
                    raise ValidationError("Parent comment does not belong to this post")

            comment = Comment(
                id=CommentId(new_id()),
                post_id=post_id,
                author_id=author_id,
                content=content,
                parent_id=parent,
                created_at=utcnow(),
            )

            saved = await self.comment_repository.add(comment)
            if not saved:
                logfire.error("Comment insert stored nothing", comment_id=comment.id)
                raise PersistenceError("create_comment", comment.id)

            logfire.info(
                "Comment created",
                comment_id=saved.id,
                post_id=post_id,
                is_reply=parent is not None,
            )
            return saved

    async def _get_owned(self, user_id: UserId, comment_id: CommentId) -> Comment:
        comment = await self.comment_repository.find_by_id(comment_id)
        if not comment:
            logfire.warn("Comment not found", comment_id=comment_id)
            raise NotFoundError("Comment", comment_id)
        if comment.author_id != user_id:
            logfire.warn(
                "Comment owned by another user",
                comment_id=comment_id,
                user_id=user_id,
            )
            raise NotAuthorizedError("comment", comment_id, user_id)
        return comment

    async def update_comment(
        self, user_id: UserId, comment_id: CommentId, content: str
    ) -> Comment:
        """Replace the body of a comment the caller wrote.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the caller is not the author
            ValidationError: If the new content is empty or too long
            PersistenceError: If the update touched no row
        """
        with logfire.span(
            "comment_service.update_comment", comment_id=comment_id, user_id=user_id
        ):
            await self._get_owned(user_id, comment_id)
            self._check_content(content)

            updated = await self.comment_repository.update_content(
                comment_id, content, utcnow()
            )
            if not updated:
                logfire.error("Comment update touched no row", comment_id=comment_id)
                raise PersistenceError("update_comment", comment_id)

            logfire.info("Comment updated", comment_id=comment_id)
            return updated

    async def delete_comment(self, user_id: UserId, comment_id: CommentId) -> int:
        """Delete a comment the caller wrote together with all its replies.

        Descendants are resolved level by level and removed in a single
        batch, so thread depth does not grow the call stack.

        Returns:
            Number of comments removed

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the caller is not the author
            PersistenceError: If nothing was deleted
        """
        with logfire.span(
            "comment_service.delete_comment", comment_id=comment_id, user_id=user_id
        ):
            comment = await self._get_owned(user_id, comment_id)

            subtree: list[CommentId] = [comment.id]
            seen = {comment.id}
            frontier: list[CommentId] = [comment.id]
            while frontier:
                child_ids = await self.comment_repository.find_child_ids(frontier)
                frontier = [cid for cid in child_ids if cid not in seen]
                seen.update(frontier)
                subtree.extend(frontier)

            deleted = await self.comment_repository.delete_many(subtree)
            if deleted == 0:
                logfire.error("Comment delete removed nothing", comment_id=comment_id)
                raise PersistenceError("delete_comment", comment_id)

            logfire.info("Comment deleted", comment_id=comment_id, removed=deleted)
            return deleted

    async def _nodes_for(self, comments: list[Comment]) -> list[CommentNode]:
        """Attach author summaries and direct reply counts."""
        authors = await self.user_repository.find_by_ids(
            {c.author_id for c in comments}
        )
        nodes = []
        for comment in comments:
            nodes.append(
                CommentNode(
                    comment=comment,
                    author=authors.get(comment.author_id),
                    reply_count=await self.comment_repository.count_children(
                        comment.id
                    ),
                )
            )
        return nodes

    async def get_replies(self, parent_id: CommentId) -> list[CommentNode]:
        """Materialize the full reply tree below a comment.

        Siblings are ordered oldest first at every level. An unknown
        parent simply has no replies.

        Args:
            parent_id: Comment whose descendants to load

        Returns:
            Direct replies, each with its own ``children`` filled in
        """
        with logfire.span("comment_service.get_replies", parent_id=parent_id):
            roots: list[CommentNode] = []
            seen = {parent_id}
            pending: deque[tuple[CommentId, list[CommentNode]]] = deque(
                [(parent_id, roots)]
            )
            total = 0

            while pending:
                current_id, siblings = pending.popleft()
                children = [
                    c
                    for c in await self.comment_repository.find_children(current_id)
                    if c.id not in seen
                ]
                for node in await self._nodes_for(children):
                    seen.add(node.comment.id)
                    siblings.append(node)
                    pending.append((node.comment.id, node.children))
                total += len(children)

            logfire.info("Replies resolved", parent_id=parent_id, count=total)
            return roots

    async def get_comment(self, comment_id: CommentId) -> CommentNode:
        """Get one comment with its whole reply tree.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.get_comment", comment_id=comment_id):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=comment_id)
                raise NotFoundError("Comment", comment_id)

            [node] = await self._nodes_for([comment])
            node.children = await self.get_replies(comment.id)
            return node

    async def get_post_comments(
        self, post_id: PostId, pagination: Pagination
    ) -> CommentListing:
        """Get one page of a post's top-level comments, newest first.

        Replies are not expanded; each item carries its direct reply count
        so clients can fetch threads lazily.
        """
        with logfire.span(
            "comment_service.get_post_comments",
            post_id=post_id,
            page=pagination.page,
            limit=pagination.limit,
        ):
            comments = await self.comment_repository.find_top_level_by_post(
                post_id, pagination.limit, pagination.offset
            )
            count = await self.comment_repository.count_top_level_by_post(post_id)
            items = await self._nodes_for(comments)

            logfire.info(
                "Post comments retrieved",
                post_id=post_id,
                returned=len(items),
                count=count,
            )
            return CommentListing(
                items=items, count=count, pages=pagination.pages_for(count)
            )

    async def get_comments_by_user(
        self, username: str, pagination: Pagination
    ) -> CommentListing:
        """Get one page of everything a user has written, newest first.

        An unknown username yields an empty listing rather than an error.
        """
        with logfire.span(
            "comment_service.get_comments_by_user",
            username=username,
            page=pagination.page,
            limit=pagination.limit,
        ):
            try:
                handle = Username(username)
            except ValueError:
                return CommentListing(items=[], count=0, pages=0)

            user = await self.user_repository.find_by_username(handle)
            if not user:
                logfire.info("No such user, empty listing", username=username)
                return CommentListing(items=[], count=0, pages=0)

            comments = await self.comment_repository.find_by_author(
                user.id, pagination.limit, pagination.offset
            )
            count = await self.comment_repository.count_by_author(user.id)
            items = await self._nodes_for(comments)

            return CommentListing(
                items=items, count=count, pages=pagination.pages_for(count)
            )
