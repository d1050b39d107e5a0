"""Shared in-memory store backing the in-memory repositories."""

from bookclub.domain.model import Comment, Message, Post, User
from bookclub.domain.value import CommentId, MessageId, PostId, UserId


class InMemoryDatabase:
    """Process-local tables keyed by ID.

    ``commits`` counts explicit unit-of-work commits so tests can check
    when a flow made its writes durable.
    """

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.posts: dict[PostId, Post] = {}
        self.comments: dict[CommentId, Comment] = {}
        self.messages: dict[MessageId, Message] = {}
        self.commits = 0

    def clear(self) -> None:
        self.users.clear()
        self.posts.clear()
        self.comments.clear()
        self.messages.clear()
        self.commits = 0
