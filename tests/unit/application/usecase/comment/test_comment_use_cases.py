"""Unit tests for comment use cases."""

import pytest

from bookclub.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentUseCase,
    GetPostCommentsRequest,
    GetPostCommentsUseCase,
    GetRepliesRequest,
    GetRepliesUseCase,
    GetUserCommentsRequest,
    GetUserCommentsUseCase,
)
from bookclub.domain.error import ValidationError
from bookclub.domain.repository import (
    CommentRepository,
    PostRepository,
    UserRepository,
)
from tests.conftest import make_comment, make_post, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def seed_thread(unit_env):
    """A post with one top-level comment, two replies and a nested reply."""
    user_repo = await unit_env.get(UserRepository)
    post_repo = await unit_env.get(PostRepository)
    comment_repo = await unit_env.get(CommentRepository)

    author = await user_repo.save(make_user("ana"))
    post = await post_repo.save(make_post(author.id))
    root = await comment_repo.add(make_comment(post.id, author.id, 0))
    first = await comment_repo.add(make_comment(post.id, author.id, 1, root.id))
    second = await comment_repo.add(make_comment(post.id, author.id, 2, root.id))
    nested = await comment_repo.add(make_comment(post.id, author.id, 3, first.id))
    return author, post, root, first, second, nested


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_returns_essential_fields(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        author, post, root, *_ = await seed_thread(unit_env)

        # Act
        response = await use_case.execute(
            CreateCommentRequest(
                user_id=author.id,
                post_id=post.id,
                content="Agreed!",
                parent_id=root.id,
            )
        )

        # Assert
        assert response.user_id == author.id
        assert response.post_id == post.id
        assert response.parent_id == root.id
        assert response.content == "Agreed!"
        assert response.modified is None
        assert response.children == []


class TestThreadUseCases:
    """Tests for GetCommentUseCase and GetRepliesUseCase."""

    @pytest.mark.asyncio
    async def test_get_replies_nests_children(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetRepliesUseCase)
        _, _, root, first, second, nested = await seed_thread(unit_env)

        # Act
        response = await use_case.execute(GetRepliesRequest(comment_id=root.id))

        # Assert
        assert response.parent_id == root.id
        assert [r.id for r in response.replies] == [first.id, second.id]
        assert response.replies[0].reply_count == 1
        assert [c.id for c in response.replies[0].children] == [nested.id]
        assert response.replies[0].user.username == "ana"

    @pytest.mark.asyncio
    async def test_get_comment_includes_tree(self, unit_env):
        use_case = await unit_env.get(GetCommentUseCase)
        _, _, root, first, second, nested = await seed_thread(unit_env)

        response = await use_case.execute(GetCommentRequest(comment_id=root.id))

        assert response.id == root.id
        assert response.reply_count == 2
        assert [c.id for c in response.children] == [first.id, second.id]
        assert response.children[0].children[0].id == nested.id

    @pytest.mark.asyncio
    async def test_delete_reports_removed_count(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)
        author, _, root, *_ = await seed_thread(unit_env)

        response = await use_case.execute(
            DeleteCommentRequest(user_id=author.id, comment_id=root.id)
        )

        assert response.deleted == 4


class TestListingUseCases:
    """Tests for the paginated comment listings."""

    @pytest.mark.asyncio
    async def test_post_comments_use_default_limit(self, unit_env):
        use_case = await unit_env.get(GetPostCommentsUseCase)
        _, post, root, *_ = await seed_thread(unit_env)

        page = await use_case.execute(GetPostCommentsRequest(post_id=post.id))

        assert [item.id for item in page.data] == [root.id]
        assert page.data[0].reply_count == 2
        assert page.data[0].children == []
        assert page.count == 1
        assert page.pages == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize(("page", "limit"), [(0, 10), (1, 0), (1, 1000)])
    async def test_bad_pagination_is_rejected(self, unit_env, page, limit):
        use_case = await unit_env.get(GetPostCommentsUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(
                GetPostCommentsRequest(post_id="p", page=page, limit=limit)
            )

    @pytest.mark.asyncio
    async def test_user_comments_page(self, unit_env):
        use_case = await unit_env.get(GetUserCommentsUseCase)
        await seed_thread(unit_env)

        page = await use_case.execute(
            GetUserCommentsRequest(username="ana", page=2, limit=3)
        )

        assert page.count == 4
        assert page.pages == 2
        assert len(page.data) == 1
