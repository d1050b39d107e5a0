"""Direct message use cases."""

from .get_conversation import (
    GetConversationRequest,
    GetConversationResponse,
    GetConversationUseCase,
)
from .get_notification_count import (
    GetNotificationCountRequest,
    GetNotificationCountResponse,
    GetNotificationCountUseCase,
)
from .get_recent_chats import (
    GetRecentChatsRequest,
    GetRecentChatsResponse,
    GetRecentChatsUseCase,
)
from .get_user_messages import (
    GetUserMessagesRequest,
    GetUserMessagesResponse,
    GetUserMessagesUseCase,
)
from .items import MessageItem, RecentChatItem
from .read_messages import ReadMessagesRequest, ReadMessagesResponse, ReadMessagesUseCase
from .send_message import SendMessageRequest, SendMessageResponse, SendMessageUseCase

__all__ = [
    "GetConversationRequest",
    "GetConversationResponse",
    "GetConversationUseCase",
    "GetNotificationCountRequest",
    "GetNotificationCountResponse",
    "GetNotificationCountUseCase",
    "GetRecentChatsRequest",
    "GetRecentChatsResponse",
    "GetRecentChatsUseCase",
    "GetUserMessagesRequest",
    "GetUserMessagesResponse",
    "GetUserMessagesUseCase",
    "MessageItem",
    "ReadMessagesRequest",
    "ReadMessagesResponse",
    "ReadMessagesUseCase",
    "RecentChatItem",
    "SendMessageRequest",
    "SendMessageResponse",
    "SendMessageUseCase",
]
