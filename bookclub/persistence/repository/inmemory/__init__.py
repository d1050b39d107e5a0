"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .database import InMemoryDatabase
from .message import InMemoryMessageRepository
from .post import InMemoryPostRepository
from .unit_of_work import InMemoryUnitOfWork
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryDatabase",
    "InMemoryMessageRepository",
    "InMemoryPostRepository",
    "InMemoryUnitOfWork",
    "InMemoryUserRepository",
]
