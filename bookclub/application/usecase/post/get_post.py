"""Get post use case."""

from datetime import datetime

from pydantic import BaseModel

from bookclub.domain.error import NotFoundError
from bookclub.domain.service import PostService
from bookclub.domain.value import PostId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str


class GetPostResponse(BaseModel):
    """Get post response."""

    id: str
    user_id: str
    content: str
    created: datetime
    modified: datetime | None


class GetPostUseCase:
    """Use case for fetching the post a discussion hangs off."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.post_service.get_post_by_id(PostId(request.post_id))
        if not post:
            raise NotFoundError("Post", request.post_id)

        return GetPostResponse(
            id=post.id,
            user_id=post.author_id,
            content=post.content,
            created=post.created_at,
            modified=post.modified_at,
        )
