"""Get recent chats use case."""

from pydantic import BaseModel

from bookclub.domain.service import MessageService
from bookclub.domain.value import UserId

from .items import RecentChatItem


class GetRecentChatsRequest(BaseModel):
    """Get recent chats request."""

    user_id: str


class GetRecentChatsResponse(BaseModel):
    """Chat counterparts, most recent conversation first."""

    chats: list[RecentChatItem]


class GetRecentChatsUseCase:
    """Use case for the chat sidebar."""

    def __init__(self, message_service: MessageService) -> None:
        self.message_service = message_service

    async def execute(self, request: GetRecentChatsRequest) -> GetRecentChatsResponse:
        chats = await self.message_service.get_recent_chats(UserId(request.user_id))
        return GetRecentChatsResponse(
            chats=[RecentChatItem.from_domain(chat) for chat in chats]
        )
