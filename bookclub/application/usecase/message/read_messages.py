"""Read messages use case."""

from pydantic import BaseModel

from bookclub.domain.service import MessageService
from bookclub.domain.value import UserId


class ReadMessagesRequest(BaseModel):
    """Read messages request."""

    sender_id: str
    receiver_id: str  # From authenticated caller


class ReadMessagesResponse(BaseModel):
    """Read messages response."""

    marked: int  # 0 when nothing was unread


class ReadMessagesUseCase:
    """Use case for marking a conversation as read."""

    def __init__(self, message_service: MessageService) -> None:
        self.message_service = message_service

    async def execute(self, request: ReadMessagesRequest) -> ReadMessagesResponse:
        marked = await self.message_service.read_messages(
            sender_id=UserId(request.sender_id),
            receiver_id=UserId(request.receiver_id),
        )
        return ReadMessagesResponse(marked=marked)
