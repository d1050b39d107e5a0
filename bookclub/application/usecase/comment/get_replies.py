"""Get replies use case."""

from pydantic import BaseModel

from bookclub.domain.service import CommentService
from bookclub.domain.value import CommentId

from .items import CommentItem


class GetRepliesRequest(BaseModel):
    """Get replies request."""

    comment_id: str


class GetRepliesResponse(BaseModel):
    """Get replies response."""

    parent_id: str
    replies: list[CommentItem]


class GetRepliesUseCase:
    """Use case for resolving every reply below a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetRepliesRequest) -> GetRepliesResponse:
        """Execute get replies flow.

        Args:
            request: Get replies request

        Returns:
            Direct replies oldest first, each with nested children
        """
        nodes = await self.comment_service.get_replies(CommentId(request.comment_id))
        return GetRepliesResponse(
            parent_id=request.comment_id,
            replies=CommentItem.from_tree(nodes),
        )
