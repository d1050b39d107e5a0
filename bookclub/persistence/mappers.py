"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict

from bookclub.domain.model import Comment, Message, Post, User
from bookclub.domain.value import (
    CommentId,
    MessageId,
    PostId,
    UserId,
    Username,
)


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(row["id"]),
        username=Username(row["username"]),
        profile_picture=row.get("profile_picture"),
        biography=row.get("biography"),
        last_active_at=row["last_active_at"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    data = user.model_dump()
    data["username"] = user.username.root
    return data


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model."""
    return Post(
        id=PostId(row["id"]),
        author_id=UserId(row["author_id"]),
        content=row["content"],
        created_at=row["created_at"],
        modified_at=row.get("modified_at"),
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    return post.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    parent_id = row.get("parent_id")
    return Comment(
        id=CommentId(row["id"]),
        post_id=PostId(row["post_id"]),
        author_id=UserId(row["author_id"]),
        content=row["content"],
        parent_id=CommentId(parent_id) if parent_id else None,
        created_at=row["created_at"],
        modified_at=row.get("modified_at"),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_message(row: Dict[str, Any]) -> Message:
    """Convert database row to Message domain model."""
    return Message(
        id=MessageId(row["id"]),
        sender_id=UserId(row["sender_id"]),
        receiver_id=UserId(row["receiver_id"]),
        content=row["content"],
        timestamp=row["timestamp"],
        is_read=row["is_read"],
    )


def message_to_dict(message: Message) -> Dict[str, Any]:
    """Convert Message domain model to database dict."""
    return message.model_dump()
