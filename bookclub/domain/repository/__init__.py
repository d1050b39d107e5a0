"""Repository interfaces for Bookclub domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from bookclub.domain.repository.comment import CommentRepository
from bookclub.domain.repository.message import MessageRepository
from bookclub.domain.repository.post import PostRepository
from bookclub.domain.repository.unit_of_work import UnitOfWork
from bookclub.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "CommentRepository",
    "MessageRepository",
    "UnitOfWork",
]
