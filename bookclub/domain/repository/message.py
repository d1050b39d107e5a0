"""Message repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from bookclub.domain.model.message import Message, RecentChat
from bookclub.domain.value import UserId


class MessageRepository(ABC):
    """Repository for direct messages."""

    @abstractmethod
    async def add(self, message: Message) -> Optional[Message]:
        """Insert a new message.

        Args:
            message: The message to insert

        Returns:
            The stored message, or None if no row was written
        """
        pass

    @abstractmethod
    async def find_by_receiver(self, receiver_id: UserId) -> List[Message]:
        """Find every message a user has received, read or not.

        Args:
            receiver_id: The receiving user's ID

        Returns:
            Messages ordered by timestamp
        """
        pass

    @abstractmethod
    async def find_conversation(
        self,
        user_a: UserId,
        user_b: UserId,
        limit: int,
        offset: int,
    ) -> List[Message]:
        """Find one page of the conversation between two users, newest first.

        Args:
            user_a: One participant
            user_b: The other participant
            limit: Maximum number of messages to return
            offset: Number of newest messages to skip

        Returns:
            Messages in either direction, ordered by timestamp descending
        """
        pass

    @abstractmethod
    async def find_recent_chats(self, user_id: UserId) -> List[RecentChat]:
        """Find every counterpart of a user, most recent conversation first.

        Args:
            user_id: The subject user

        Returns:
            One entry per counterpart with its unread count and the
            timestamp of the latest message in the pair
        """
        pass

    @abstractmethod
    async def mark_read(self, sender_id: UserId, receiver_id: UserId) -> int:
        """Mark all unread messages from sender to receiver as read.

        Args:
            sender_id: Who sent the messages
            receiver_id: Who received them

        Returns:
            Number of messages that went from unread to read
        """
        pass

    @abstractmethod
    async def count_unread(self, receiver_id: UserId) -> int:
        """Count unread messages addressed to a user.

        Args:
            receiver_id: The receiving user's ID

        Returns:
            Number of unread messages from all senders
        """
        pass
