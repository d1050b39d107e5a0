"""Direct message domain service."""

from dataclasses import dataclass
from typing import Any

import logfire

from bookclub.domain.error import NotFoundError, PersistenceError, ValidationError
from bookclub.domain.model import Message, RecentChat, User
from bookclub.domain.model.common import utcnow
from bookclub.domain.repository import MessageRepository, UnitOfWork, UserRepository
from bookclub.domain.value import MessageId, Pagination, UserId, new_id

from .base import Service
from .notifier import RealtimeNotifier


def user_summary(user: User | None) -> dict[str, Any] | None:
    """Public view of a user embedded in messages and comments."""
    if user is None:
        return None
    return {
        "id": user.id,
        "username": user.username.root,
        "profile_picture": user.profile_picture,
    }


@dataclass
class MessageView:
    """A message together with both participants."""

    message: Message
    sender: User | None
    receiver: User | None

    def to_payload(self) -> dict[str, Any]:
        """JSON body pushed to the receiver's live connections."""
        return {
            "id": self.message.id,
            "content": self.message.content,
            "timestamp": self.message.timestamp.isoformat(),
            "is_read": self.message.is_read,
            "sender_id": self.message.sender_id,
            "receiver_id": self.message.receiver_id,
            "sender": user_summary(self.sender),
            "receiver": user_summary(self.receiver),
        }


class MessageService(Service):
    """Domain service for direct messaging and presence."""

    def __init__(
        self,
        message_repository: MessageRepository,
        user_repository: UserRepository,
        unit_of_work: UnitOfWork,
        notifier: RealtimeNotifier,
        message_event: str = "ReceiveMessage",
        max_content_length: int = 5000,
    ) -> None:
        """Initialize message service.

        Args:
            message_repository: Message repository
            user_repository: User repository
            unit_of_work: Commits the message before it is pushed
            notifier: Push channel for newly delivered messages
            message_event: Event name pushed to the receiver
            max_content_length: Longest accepted message body
        """
        self.message_repository = message_repository
        self.user_repository = user_repository
        self.unit_of_work = unit_of_work
        self.notifier = notifier
        self.message_event = message_event
        self.max_content_length = max_content_length

    async def send(
        self, sender_id: UserId, receiver_id: UserId, content: str
    ) -> MessageView:
        """Store a message and push it to the receiver.

        The message is committed before the push is scheduled, so a
        receiver reacting to the push can already read it back. The push
        is fire-and-forget: an offline receiver or a failing channel never
        fails the send.

        Raises:
            ValidationError: If content is empty or too long
            NotFoundError: If sender or receiver does not exist
            PersistenceError: If nothing was stored
        """
        with logfire.span(
            "message_service.send", sender_id=sender_id, receiver_id=receiver_id
        ):
            if not content or not content.strip():
                raise ValidationError("Message content must not be empty")
            if len(content) > self.max_content_length:
                raise ValidationError(
                    f"Message content exceeds {self.max_content_length} characters"
                )

            receiver = await self.user_repository.find_by_id(receiver_id)
            if not receiver:
                logfire.warn("Receiver not found", receiver_id=receiver_id)
                raise NotFoundError("User", receiver_id)

            sender = await self.user_repository.find_by_id(sender_id)
            if not sender:
                logfire.warn("Sender not found", sender_id=sender_id)
                raise NotFoundError("User", sender_id)

            now = utcnow()
            # Before the insert, so a failed touch leaves nothing stored
            if not await self.user_repository.touch_last_active(sender_id, now):
                logfire.error("Sender activity not updated", sender_id=sender_id)
                raise PersistenceError("send_message", sender_id)

            message = Message(
                id=MessageId(new_id()),
                sender_id=sender_id,
                receiver_id=receiver_id,
                content=content,
                timestamp=now,
                is_read=False,
            )

            saved = await self.message_repository.add(message)
            if not saved:
                logfire.error("Message insert stored nothing", message_id=message.id)
                raise PersistenceError("send_message", message.id)

            await self.unit_of_work.commit()

            view = MessageView(message=saved, sender=sender, receiver=receiver)
            try:
                self.notifier.notify_user(
                    receiver_id, self.message_event, view.to_payload()
                )
            except Exception as e:
                logfire.error(
                    "Message push failed",
                    message_id=saved.id,
                    receiver_id=receiver_id,
                    error=str(e),
                )

            await self.user_repository.touch_last_active(receiver_id, utcnow())

            logfire.info(
                "Message sent",
                message_id=saved.id,
                sender_id=sender_id,
                receiver_id=receiver_id,
            )
            return view

    async def get_conversation(
        self, user_id: UserId, other_id: UserId, pagination: Pagination
    ) -> list[Message]:
        """Get one page of a two-person conversation.

        Pages are counted back from the newest message, but each page is
        returned oldest first so it reads top to bottom.
        """
        with logfire.span(
            "message_service.get_conversation",
            user_id=user_id,
            other_id=other_id,
            page=pagination.page,
            limit=pagination.limit,
        ):
            newest_first = await self.message_repository.find_conversation(
                user_id, other_id, pagination.limit, pagination.offset
            )
            return list(reversed(newest_first))

    async def get_user_messages(self, user_id: UserId) -> list[MessageView]:
        """Get every message addressed to the user with both participants."""
        with logfire.span("message_service.get_user_messages", user_id=user_id):
            messages = await self.message_repository.find_by_receiver(user_id)
            users = await self.user_repository.find_by_ids(
                {m.sender_id for m in messages} | {m.receiver_id for m in messages}
            )
            return [
                MessageView(
                    message=m,
                    sender=users.get(m.sender_id),
                    receiver=users.get(m.receiver_id),
                )
                for m in messages
            ]

    async def get_recent_chats(self, user_id: UserId) -> list[RecentChat]:
        """Get everyone the user has exchanged messages with.

        Most recent conversation first, each with the number of messages
        from that counterpart the user has not read yet.
        """
        with logfire.span("message_service.get_recent_chats", user_id=user_id):
            chats = await self.message_repository.find_recent_chats(user_id)
            logfire.info("Recent chats retrieved", user_id=user_id, count=len(chats))
            return chats

    async def read_messages(self, sender_id: UserId, receiver_id: UserId) -> int:
        """Mark everything ``sender_id`` sent to ``receiver_id`` as read.

        Returns:
            Number of messages newly marked; 0 when nothing was unread
        """
        with logfire.span(
            "message_service.read_messages",
            sender_id=sender_id,
            receiver_id=receiver_id,
        ):
            marked = await self.message_repository.mark_read(sender_id, receiver_id)
            if marked > 0:
                await self.user_repository.touch_last_active(receiver_id, utcnow())
            logfire.info(
                "Messages marked read",
                sender_id=sender_id,
                receiver_id=receiver_id,
                marked=marked,
            )
            return marked

    async def get_notification_count(self, user_id: UserId) -> int:
        """Number of unread messages addressed to the user."""
        with logfire.span("message_service.get_notification_count", user_id=user_id):
            return await self.message_repository.count_unread(user_id)
