"""Comment entity.

Comments form a forest per post: top-level comments have no parent and
replies point at their parent through ``parent_id``. The tree is stored as
a flat adjacency list and resolved on read.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from bookclub.domain.model.common import DomainModel, utcnow
from bookclub.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment entity.

    A reply's parent always belongs to the same post.
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    content: str = Field(min_length=1)
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=utcnow)
    modified_at: Optional[datetime] = None

    @property
    def is_top_level(self) -> bool:
        return self.parent_id is None
