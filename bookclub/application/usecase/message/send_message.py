"""Send message use case."""

from pydantic import BaseModel

from bookclub.domain.service import MessageService
from bookclub.domain.value import UserId

from .items import MessageItem


class SendMessageRequest(BaseModel):
    """Send message request."""

    sender_id: str  # From authenticated caller
    receiver_id: str
    content: str


class SendMessageResponse(MessageItem):
    """The stored message with both participants."""


class SendMessageUseCase:
    """Use case for sending a direct message."""

    def __init__(self, message_service: MessageService) -> None:
        """Initialize send message use case.

        Args:
            message_service: Message domain service
        """
        self.message_service = message_service

    async def execute(self, request: SendMessageRequest) -> SendMessageResponse:
        """Execute send message flow.

        The receiver is notified in real time when connected; that push
        never affects the outcome.

        Raises:
            NotFoundError: If sender or receiver does not exist
            ValidationError: If content is empty or too long
        """
        view = await self.message_service.send(
            sender_id=UserId(request.sender_id),
            receiver_id=UserId(request.receiver_id),
            content=request.content,
        )
        return SendMessageResponse(**dict(MessageItem.from_view(view)))
