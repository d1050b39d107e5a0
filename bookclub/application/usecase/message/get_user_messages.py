"""Get user messages use case."""

from pydantic import BaseModel

from bookclub.domain.service import MessageService
from bookclub.domain.value import UserId

from .items import MessageItem


class GetUserMessagesRequest(BaseModel):
    """Get user messages request."""

    user_id: str


class GetUserMessagesResponse(BaseModel):
    """Every message the user has received."""

    messages: list[MessageItem]


class GetUserMessagesUseCase:
    """Use case for listing a user's inbox."""

    def __init__(self, message_service: MessageService) -> None:
        self.message_service = message_service

    async def execute(self, request: GetUserMessagesRequest) -> GetUserMessagesResponse:
        views = await self.message_service.get_user_messages(UserId(request.user_id))
        return GetUserMessagesResponse(
            messages=[MessageItem.from_view(view) for view in views]
        )
