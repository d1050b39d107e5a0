"""Create comment use case."""

from pydantic import BaseModel

from bookclub.domain.service import CommentService
from bookclub.domain.value import PostId, UserId

from .items import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    user_id: str  # From authenticated caller
    post_id: str
    content: str
    parent_id: str | None = None  # Blank means top-level


class CreateCommentResponse(CommentItem):
    """Create comment response."""


class CreateCommentUseCase:
    """Use case for commenting on a post or replying to another comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            The stored comment without children

        Raises:
            NotFoundError: If the post or parent does not exist
            ValidationError: If content is empty or the parent is on another post
        """
        comment = await self.comment_service.create_comment(
            author_id=UserId(request.user_id),
            post_id=PostId(request.post_id),
            content=request.content,
            parent_id=request.parent_id,
        )
        return CreateCommentResponse(
            **CommentItem.from_comment(comment).model_dump(exclude={"children"})
        )
