"""Get message notification count use case."""

from pydantic import BaseModel

from bookclub.domain.service import MessageService
from bookclub.domain.value import UserId


class GetNotificationCountRequest(BaseModel):
    """Get notification count request."""

    user_id: str


class GetNotificationCountResponse(BaseModel):
    """Unread messages across all senders."""

    count: int


class GetNotificationCountUseCase:
    """Use case for the unread message badge."""

    def __init__(self, message_service: MessageService) -> None:
        self.message_service = message_service

    async def execute(
        self, request: GetNotificationCountRequest
    ) -> GetNotificationCountResponse:
        count = await self.message_service.get_notification_count(
            UserId(request.user_id)
        )
        return GetNotificationCountResponse(count=count)
