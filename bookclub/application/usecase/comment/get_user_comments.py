"""Get comments by user use case."""

from pydantic import BaseModel

from bookclub.config import PaginationSettings
from bookclub.domain.service import CommentService
from bookclub.domain.value import Pagination

from .items import CommentPage


class GetUserCommentsRequest(BaseModel):
    """Get comments by user request."""

    username: str
    page: int = 1
    limit: int | None = None


class GetUserCommentsUseCase:
    """Use case for listing everything a user has commented."""

    def __init__(
        self,
        comment_service: CommentService,
        pagination_settings: PaginationSettings,
    ) -> None:
        self.comment_service = comment_service
        self.pagination_settings = pagination_settings

    async def execute(self, request: GetUserCommentsRequest) -> CommentPage:
        limit = request.limit
        if limit is None:
            limit = self.pagination_settings.default_limit
        pagination = Pagination.create(
            page=request.page,
            limit=limit,
            max_limit=self.pagination_settings.max_limit,
        )
        listing = await self.comment_service.get_comments_by_user(
            request.username, pagination
        )
        return CommentPage.from_domain(listing)
