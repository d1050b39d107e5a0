"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone

import logfire

from bookclub.config import AuthSettings
from bookclub.domain.model import Comment, Post, User
from bookclub.domain.value import CommentId, PostId, UserId, Username, new_id
from bookclub.util.jwt import create_token

# Keep telemetry local while tests run
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def at(minutes: int) -> datetime:
    """A fixed timestamp ``minutes`` after BASE_TIME, for deterministic ordering."""
    return BASE_TIME + timedelta(minutes=minutes)


def make_user(username: str, user_id: str | None = None) -> User:
    """Helper to build a user with sensible defaults."""
    return User(
        id=UserId(user_id or new_id()),
        username=Username(username),
        profile_picture=f"https://img.example/{username}.png",
        last_active_at=BASE_TIME,
        created_at=BASE_TIME,
    )


def make_post(author_id: str, post_id: str | None = None) -> Post:
    """Helper to build a post."""
    return Post(
        id=PostId(post_id or new_id()),
        author_id=UserId(author_id),
        content="What is everyone reading this week?",
        created_at=BASE_TIME,
    )


def make_comment(
    post_id: str,
    author_id: str,
    minutes: int,
    parent_id: str | None = None,
    content: str | None = None,
) -> Comment:
    """Helper to build a comment created ``minutes`` after BASE_TIME."""
    return Comment(
        id=CommentId(new_id()),
        post_id=PostId(post_id),
        author_id=UserId(author_id),
        content=content or f"comment at {minutes}",
        parent_id=CommentId(parent_id) if parent_id else None,
        created_at=at(minutes),
    )


def make_token(user_id: str) -> str:
    """Sign a token with the default test settings."""
    return create_token(user_id, AuthSettings())
