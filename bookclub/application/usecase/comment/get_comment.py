"""Get comment use case."""

from pydantic import BaseModel

from bookclub.domain.service import CommentService
from bookclub.domain.value import CommentId

from .items import CommentItem


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: str


class GetCommentResponse(CommentItem):
    """A comment with its whole reply tree."""


class GetCommentUseCase:
    """Use case for loading a single comment thread."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetCommentRequest) -> GetCommentResponse:
        """Execute get comment flow.

        Raises:
            NotFoundError: If comment not found
        """
        node = await self.comment_service.get_comment(CommentId(request.comment_id))
        [item] = CommentItem.from_tree([node])
        return GetCommentResponse(**dict(item))
