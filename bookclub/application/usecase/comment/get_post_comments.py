"""Get post comments use case."""

from pydantic import BaseModel

from bookclub.config import PaginationSettings
from bookclub.domain.service import CommentService
from bookclub.domain.value import Pagination, PostId

from .items import CommentPage


class GetPostCommentsRequest(BaseModel):
    """Get post comments request."""

    post_id: str
    page: int = 1
    limit: int | None = None  # Falls back to the configured default


class GetPostCommentsUseCase:
    """Use case for listing a post's top-level comments."""

    def __init__(
        self,
        comment_service: CommentService,
        pagination_settings: PaginationSettings,
    ) -> None:
        """Initialize get post comments use case.

        Args:
            comment_service: Comment domain service
            pagination_settings: Paging defaults and limits
        """
        self.comment_service = comment_service
        self.pagination_settings = pagination_settings

    async def execute(self, request: GetPostCommentsRequest) -> CommentPage:
        """Execute get post comments flow.

        Raises:
            ValidationError: If page or limit is out of range
        """
        limit = request.limit
        if limit is None:
            limit = self.pagination_settings.default_limit
        pagination = Pagination.create(
            page=request.page,
            limit=limit,
            max_limit=self.pagination_settings.max_limit,
        )
        listing = await self.comment_service.get_post_comments(
            PostId(request.post_id), pagination
        )
        return CommentPage.from_domain(listing)
