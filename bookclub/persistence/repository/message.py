"""PostgreSQL implementation of Message repository."""

from typing import List, Optional

from sqlalchemy import and_, desc, func, insert, or_, select, union_all, update
from sqlalchemy.ext.asyncio import AsyncSession

from bookclub.domain.model import Message, RecentChat
from bookclub.domain.repository import MessageRepository
from bookclub.domain.value import UserId
from bookclub.persistence.mappers import message_to_dict, row_to_message, row_to_user
from bookclub.persistence.tables import messages_table, users_table


class PostgresMessageRepository(MessageRepository):
    """PostgreSQL implementation of MessageRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def add(self, message: Message) -> Optional[Message]:
        """Insert a message and read it back."""
        stmt = (
            insert(messages_table)
            .values(**message_to_dict(message))
            .returning(messages_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_message(dict(row)) if row else None

    async def find_by_receiver(self, receiver_id: UserId) -> List[Message]:
        """Find every message addressed to a user."""
        stmt = (
            select(messages_table)
            .where(messages_table.c.receiver_id == receiver_id)
            .order_by(messages_table.c.timestamp, messages_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_message(dict(row)) for row in result.mappings().all()]

    async def find_conversation(
        self,
        user_a: UserId,
        user_b: UserId,
        limit: int,
        offset: int,
    ) -> List[Message]:
        """Find one page of a conversation, newest first."""
        m = messages_table.c
        stmt = (
            select(messages_table)
            .where(
                or_(
                    and_(m.sender_id == user_a, m.receiver_id == user_b),
                    and_(m.sender_id == user_b, m.receiver_id == user_a),
                )
            )
            .order_by(desc(m.timestamp), desc(m.id))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_message(dict(row)) for row in result.mappings().all()]

    async def find_recent_chats(self, user_id: UserId) -> List[RecentChat]:
        """Find every counterpart of a user, latest conversation first.

        Both directions are folded into one (counterpart, timestamp) stream,
        grouped per counterpart, and the unread count is a correlated
        subquery over what the counterpart sent.
        """
        m = messages_table.c
        exchanged = union_all(
            select(m.sender_id.label("counterpart_id"), m.timestamp).where(
                m.receiver_id == user_id
            ),
            select(m.receiver_id.label("counterpart_id"), m.timestamp).where(
                m.sender_id == user_id
            ),
        ).subquery("exchanged")

        latest = (
            select(
                exchanged.c.counterpart_id,
                func.max(exchanged.c.timestamp).label("last_message_at"),
            )
            .group_by(exchanged.c.counterpart_id)
            .subquery("latest")
        )

        unread_messages = messages_table.alias("unread_messages")
        unread_count = (
            select(func.count())
            .select_from(unread_messages)
            .where(unread_messages.c.sender_id == latest.c.counterpart_id)
            .where(unread_messages.c.receiver_id == user_id)
            .where(unread_messages.c.is_read.is_(False))
            .scalar_subquery()
        )

        stmt = (
            select(
                users_table,
                latest.c.last_message_at,
                unread_count.label("unread_count"),
            )
            .select_from(
                users_table.join(latest, users_table.c.id == latest.c.counterpart_id)
            )
            .order_by(desc(latest.c.last_message_at), users_table.c.id)
        )

        result = await self.session.execute(stmt)
        return [
            RecentChat(
                user=row_to_user(dict(row)),
                unread_count=row["unread_count"] or 0,
                last_message_at=row["last_message_at"],
            )
            for row in result.mappings().all()
        ]

    async def mark_read(self, sender_id: UserId, receiver_id: UserId) -> int:
        """Flip unread messages from sender to receiver to read."""
        stmt = (
            update(messages_table)
            .where(messages_table.c.sender_id == sender_id)
            .where(messages_table.c.receiver_id == receiver_id)
            .where(messages_table.c.is_read.is_(False))
            .values(is_read=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def count_unread(self, receiver_id: UserId) -> int:
        """Count unread messages addressed to a user."""
        stmt = (
            select(func.count())
            .select_from(messages_table)
            .where(messages_table.c.receiver_id == receiver_id)
            .where(messages_table.c.is_read.is_(False))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
