"""PostgreSQL repository implementations."""

from bookclub.persistence.repository.comment import PostgresCommentRepository
from bookclub.persistence.repository.message import PostgresMessageRepository
from bookclub.persistence.repository.post import PostgresPostRepository
from bookclub.persistence.repository.unit_of_work import PostgresUnitOfWork
from bookclub.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresMessageRepository",
    "PostgresUnitOfWork",
]
