"""In-memory message repository for testing."""

from typing import Optional

from bookclub.domain.model import Message, RecentChat
from bookclub.domain.repository.message import MessageRepository
from bookclub.domain.value import UserId

from .database import InMemoryDatabase


class InMemoryMessageRepository(MessageRepository):
    """In-memory implementation of MessageRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self._db = db

    def _chronological(self) -> list[Message]:
        return sorted(self._db.messages.values(), key=lambda m: (m.timestamp, m.id))

    async def add(self, message: Message) -> Optional[Message]:
        """Insert a message."""
        if message.id in self._db.messages:
            return None
        self._db.messages[message.id] = message
        return message

    async def find_by_receiver(self, receiver_id: UserId) -> list[Message]:
        """Find every message addressed to a user."""
        return [m for m in self._chronological() if m.receiver_id == receiver_id]

    async def find_conversation(
        self,
        user_a: UserId,
        user_b: UserId,
        limit: int,
        offset: int,
    ) -> list[Message]:
        """Find one page of a conversation, newest first."""
        pair = {user_a, user_b}
        conversation = [
            m
            for m in self._chronological()
            if {m.sender_id, m.receiver_id} == pair
        ]
        conversation.reverse()
        return conversation[offset : offset + limit]

    async def find_recent_chats(self, user_id: UserId) -> list[RecentChat]:
        """Find every counterpart of a user, latest conversation first."""
        latest: dict[UserId, Message] = {}
        unread: dict[UserId, int] = {}
        for message in self._chronological():
            if not message.involves(user_id):
                continue
            other = message.counterpart_of(user_id)
            latest[other] = message
            if (
                message.receiver_id == user_id
                and message.sender_id == other
                and not message.is_read
            ):
                unread[other] = unread.get(other, 0) + 1

        chats = [
            RecentChat(
                user=self._db.users[other],
                unread_count=unread.get(other, 0),
                last_message_at=message.timestamp,
            )
            for other, message in latest.items()
            if other in self._db.users
        ]
        chats.sort(key=lambda c: c.last_message_at, reverse=True)
        return chats

    async def mark_read(self, sender_id: UserId, receiver_id: UserId) -> int:
        """Flip unread messages from sender to receiver to read."""
        marked = 0
        for message_id, message in self._db.messages.items():
            if (
                message.sender_id == sender_id
                and message.receiver_id == receiver_id
                and not message.is_read
            ):
                self._db.messages[message_id] = message.model_copy(
                    update={"is_read": True}
                )
                marked += 1
        return marked

    async def count_unread(self, receiver_id: UserId) -> int:
        """Count unread messages addressed to a user."""
        return sum(
            1
            for m in self._db.messages.values()
            if m.receiver_id == receiver_id and not m.is_read
        )
