"""Domain value objects for Bookclub."""

from bookclub.domain.value.identifiers import (
    CommentId,
    MessageId,
    PostId,
    UserId,
    new_id,
)
from bookclub.domain.value.types import Pagination, Username

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "MessageId",
    "new_id",
    # Types
    "Pagination",
    "Username",
]
