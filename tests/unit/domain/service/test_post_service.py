"""Unit tests for PostService."""

import pytest

from bookclub.domain.repository import PostRepository
from bookclub.domain.service import PostService
from bookclub.domain.value import PostId
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetPostById:
    """Tests for PostService.get_post_by_id."""

    @pytest.mark.asyncio
    async def test_returns_stored_post(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post("u1"))

        # Act
        found = await post_service.get_post_by_id(post.id)

        # Assert
        assert found == post

    @pytest.mark.asyncio
    async def test_missing_post_is_none(self, unit_env):
        post_service = await unit_env.get(PostService)

        assert await post_service.get_post_by_id(PostId("missing")) is None
