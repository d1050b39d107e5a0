"""Delete comment use case."""

from pydantic import BaseModel

from bookclub.domain.service import CommentService
from bookclub.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    user_id: str  # From authenticated caller
    comment_id: str


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    deleted: int  # The comment plus every reply below it


class DeleteCommentUseCase:
    """Use case for deleting a comment thread."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        deleted = await self.comment_service.delete_comment(
            user_id=UserId(request.user_id),
            comment_id=CommentId(request.comment_id),
        )
        return DeleteCommentResponse(comment_id=request.comment_id, deleted=deleted)
