"""Update comment use case."""

from pydantic import BaseModel

from bookclub.domain.service import CommentService
from bookclub.domain.value import CommentId, UserId

from .items import CommentItem


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    user_id: str  # From authenticated caller
    comment_id: str
    content: str


class UpdateCommentResponse(CommentItem):
    """Update comment response."""


class UpdateCommentUseCase:
    """Use case for editing a comment's content."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Raises:
            NotFoundError: If comment not found
            NotAuthorizedError: If the caller is not the author
            PersistenceError: If the write touched no row
        """
        comment = await self.comment_service.update_comment(
            user_id=UserId(request.user_id),
            comment_id=CommentId(request.comment_id),
            content=request.content,
        )
        return UpdateCommentResponse(
            **CommentItem.from_comment(comment).model_dump(exclude={"children"})
        )
