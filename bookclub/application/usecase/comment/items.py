"""Comment response models."""

from datetime import datetime

from pydantic import BaseModel

from bookclub.application.usecase.common import UserSummary
from bookclub.domain.model import Comment
from bookclub.domain.service import CommentListing, CommentNode


class CommentItem(BaseModel):
    """Comment item in response.

    ``children`` is only filled in where a thread is resolved; listings
    leave it empty and rely on ``reply_count``.
    """

    id: str
    user_id: str
    post_id: str
    parent_id: str | None
    content: str
    created: datetime
    modified: datetime | None
    user: UserSummary | None = None
    reply_count: int = 0
    children: list["CommentItem"] = []

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentItem":
        return cls(
            id=comment.id,
            user_id=comment.author_id,
            post_id=comment.post_id,
            parent_id=comment.parent_id,
            content=comment.content,
            created=comment.created_at,
            modified=comment.modified_at,
        )

    @classmethod
    def from_domain(
        cls, node: CommentNode, children: list["CommentItem"] | None = None
    ) -> "CommentItem":
        """Convert one resolved node, with already converted children."""
        item = cls.from_comment(node.comment)
        return item.model_copy(
            update={
                "user": UserSummary.from_domain(node.author),
                "reply_count": node.reply_count,
                "children": children or [],
            }
        )

    @classmethod
    def from_tree(cls, roots: list[CommentNode]) -> list["CommentItem"]:
        """Convert a resolved forest without recursing per level.

        Nodes are visited in pre-order and converted in reverse, so every
        child is built before its parent.
        """
        visited: list[CommentNode] = []
        stack = list(roots)
        while stack:
            node = stack.pop()
            visited.append(node)
            stack.extend(node.children)

        built: dict[int, CommentItem] = {}
        for node in reversed(visited):
            built[id(node)] = cls.from_domain(
                node, children=[built[id(child)] for child in node.children]
            )
        return [built[id(root)] for root in roots]


class CommentPage(BaseModel):
    """One page of comments plus listing totals."""

    data: list[CommentItem]
    count: int
    pages: int

    @classmethod
    def from_domain(cls, listing: CommentListing) -> "CommentPage":
        return cls(
            data=[CommentItem.from_domain(node) for node in listing.items],
            count=listing.count,
            pages=listing.pages,
        )
