"""Message response models."""

from datetime import datetime

from pydantic import BaseModel

from bookclub.application.usecase.common import UserSummary
from bookclub.domain.model import Message, RecentChat
from bookclub.domain.service import MessageView


class MessageItem(BaseModel):
    """Message item in response."""

    id: str
    content: str
    timestamp: datetime
    is_read: bool
    sender_id: str
    receiver_id: str
    sender: UserSummary | None = None
    receiver: UserSummary | None = None

    @classmethod
    def from_message(cls, message: Message) -> "MessageItem":
        return cls(
            id=message.id,
            content=message.content,
            timestamp=message.timestamp,
            is_read=message.is_read,
            sender_id=message.sender_id,
            receiver_id=message.receiver_id,
        )

    @classmethod
    def from_view(cls, view: MessageView) -> "MessageItem":
        return cls.from_message(view.message).model_copy(
            update={
                "sender": UserSummary.from_domain(view.sender),
                "receiver": UserSummary.from_domain(view.receiver),
            }
        )


class RecentChatItem(BaseModel):
    """A chat counterpart in the recent chats list."""

    id: str
    username: str
    profile_picture: str | None
    last_active_at: datetime
    unread_messages: int
    last_message_at: datetime

    @classmethod
    def from_domain(cls, chat: RecentChat) -> "RecentChatItem":
        return cls(
            id=chat.user.id,
            username=chat.user.username.root,
            profile_picture=chat.user.profile_picture,
            last_active_at=chat.user.last_active_at,
            unread_messages=chat.unread_count,
            last_message_at=chat.last_message_at,
        )
