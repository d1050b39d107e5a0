"""Unit tests for UserService."""

import pytest

from bookclub.domain.error import NotFoundError
from bookclub.domain.repository import UserRepository
from bookclub.domain.service import UserService
from bookclub.domain.value import UserId
from tests.conftest import BASE_TIME, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestTouchLastActivity:
    """Tests for touch_last_activity method."""

    @pytest.mark.asyncio
    async def test_existing_user_is_touched(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user("dana"))

        # Act
        touched = await user_service.touch_last_activity(user.id)

        # Assert
        assert touched is True
        assert (await user_repo.find_by_id(user.id)).last_active_at > BASE_TIME

    @pytest.mark.asyncio
    async def test_unknown_user_returns_false(self, unit_env):
        user_service = await unit_env.get(UserService)

        assert await user_service.touch_last_activity(UserId("ghost")) is False


class TestLookups:
    """Tests for user lookups."""

    @pytest.mark.asyncio
    async def test_get_by_id_raises_for_unknown_user(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await user_service.get_by_id(UserId("ghost"))

    @pytest.mark.asyncio
    async def test_get_user_by_username(self, unit_env):
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user("dana"))

        assert await user_service.get_user_by_username("dana") == user
        assert await user_service.get_user_by_username("erin") is None
        assert await user_service.get_user_by_username("") is None
