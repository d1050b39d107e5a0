"""Strongly typed identifiers for Bookclub domain entities.

Identifiers are opaque strings generated by the server. NewType keeps the
different entity IDs from being mixed up.
"""

from typing import NewType
from uuid import uuid4

UserId = NewType("UserId", str)
PostId = NewType("PostId", str)
CommentId = NewType("CommentId", str)
MessageId = NewType("MessageId", str)


def new_id() -> str:
    """Generate a fresh opaque identifier."""
    return str(uuid4())
