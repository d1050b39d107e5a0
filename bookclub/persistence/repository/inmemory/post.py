"""In-memory post repository for testing."""

from typing import Optional

from bookclub.domain.model.post import Post
from bookclub.domain.repository.post import PostRepository
from bookclub.domain.value import PostId

from .database import InMemoryDatabase


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self._db = db

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._db.posts.get(post_id)

    async def exists(self, post_id: PostId) -> bool:
        """Check whether a post exists."""
        return post_id in self._db.posts

    async def save(self, post: Post) -> Post:
        """Save a post."""
        self._db.posts[post.id] = post
        return post
