"""Get conversation use case."""

from pydantic import BaseModel

from bookclub.config import MessageSettings, PaginationSettings
from bookclub.domain.service import MessageService
from bookclub.domain.value import Pagination, UserId

from .items import MessageItem


class GetConversationRequest(BaseModel):
    """Get conversation request."""

    user_id: str  # From authenticated caller
    other_id: str
    page: int = 1
    limit: int | None = None


class GetConversationResponse(BaseModel):
    """One page of a conversation, oldest message first."""

    messages: list[MessageItem]


class GetConversationUseCase:
    """Use case for paging back through a two-person conversation."""

    def __init__(
        self,
        message_service: MessageService,
        pagination_settings: PaginationSettings,
        message_settings: MessageSettings,
    ) -> None:
        self.message_service = message_service
        self.pagination_settings = pagination_settings
        self.message_settings = message_settings

    async def execute(self, request: GetConversationRequest) -> GetConversationResponse:
        """Execute get conversation flow.

        Page 1 holds the most recent messages.

        Raises:
            ValidationError: If page or limit is out of range
        """
        limit = request.limit
        if limit is None:
            limit = self.message_settings.default_conversation_limit
        pagination = Pagination.create(
            page=request.page,
            limit=limit,
            max_limit=self.pagination_settings.max_limit,
        )
        messages = await self.message_service.get_conversation(
            UserId(request.user_id), UserId(request.other_id), pagination
        )
        return GetConversationResponse(
            messages=[MessageItem.from_message(m) for m in messages]
        )
