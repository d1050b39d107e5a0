"""Domain model entities for Bookclub."""

from bookclub.domain.model.comment import Comment
from bookclub.domain.model.message import Message, RecentChat
from bookclub.domain.model.post import Post
from bookclub.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "Comment",
    "Message",
    "RecentChat",
]
