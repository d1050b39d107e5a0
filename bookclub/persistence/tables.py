"""SQLAlchemy table definitions for Bookclub.

Identifiers are opaque strings generated by the application.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("username", String(256), nullable=False, unique=True),
    Column("profile_picture", Text, nullable=True),
    Column("biography", Text, nullable=True),
    Column(
        "last_active_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", String(64), primary_key=True),
    Column(
        "author_id",
        String(64),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("modified_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_posts_author", posts_table.c.author_id)

# ============================================================================
# COMMENTS TABLE (adjacency list)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", String(64), primary_key=True),
    Column(
        "post_id",
        String(64),
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_id",
        String(64),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    # Replies go with their parent
    Column(
        "parent_id",
        String(64),
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("modified_at", TIMESTAMP(timezone=True), nullable=True),
)

Index(
    "idx_comments_post_top_level",
    comments_table.c.post_id,
    comments_table.c.parent_id,
    comments_table.c.created_at,
)
Index("idx_comments_parent", comments_table.c.parent_id, comments_table.c.created_at)
Index("idx_comments_author", comments_table.c.author_id, comments_table.c.created_at)

# ============================================================================
# MESSAGES TABLE
# ============================================================================
messages_table = Table(
    "messages",
    metadata,
    Column("id", String(64), primary_key=True),
    Column(
        "sender_id",
        String(64),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "receiver_id",
        String(64),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("content", Text, nullable=False),
    Column(
        "timestamp", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("is_read", Boolean, nullable=False, server_default="false"),
)

Index(
    "idx_messages_pair",
    messages_table.c.sender_id,
    messages_table.c.receiver_id,
    messages_table.c.timestamp,
)
Index("idx_messages_unread", messages_table.c.receiver_id, messages_table.c.is_read)
