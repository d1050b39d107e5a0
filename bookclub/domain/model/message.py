"""Direct message entity."""

from datetime import datetime

from pydantic import Field

from bookclub.domain.model.common import DomainModel, utcnow
from bookclub.domain.model.user import User
from bookclub.domain.value import MessageId, UserId


class Message(DomainModel):
    """A direct message between two users.

    Immutable apart from ``is_read``, which only ever goes from False to
    True when the receiver opens the conversation.
    """

    id: MessageId
    sender_id: UserId
    receiver_id: UserId
    content: str = Field(min_length=1)
    timestamp: datetime = Field(default_factory=utcnow)
    is_read: bool = False

    def involves(self, user_id: UserId) -> bool:
        """Whether the user is the sender or the receiver."""
        return self.sender_id == user_id or self.receiver_id == user_id

    def counterpart_of(self, user_id: UserId) -> UserId:
        """The other participant, seen from ``user_id``."""
        return self.sender_id if self.receiver_id == user_id else self.receiver_id


class RecentChat(DomainModel):
    """A chat counterpart of some user, ranked by last exchanged message."""

    user: User
    unread_count: int = Field(default=0, ge=0)
    last_message_at: datetime
