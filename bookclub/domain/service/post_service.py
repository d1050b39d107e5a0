"""Post domain service."""

import logfire

from bookclub.domain.model import Post
from bookclub.domain.repository import PostRepository
from bookclub.domain.value import PostId

from .base import Service


class PostService(Service):
    """Domain service for post lookups."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=post_id):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=post_id)
            return post
