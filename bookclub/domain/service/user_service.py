"""User domain service."""

import logfire

from bookclub.domain.error import NotFoundError
from bookclub.domain.model import User
from bookclub.domain.model.common import utcnow
from bookclub.domain.repository import UserRepository
from bookclub.domain.value import UserId, Username

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=user_id):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=user_id)
                raise NotFoundError("User", user_id)
            return user

    async def get_user_by_username(self, username: str) -> User | None:
        """Get user by username.

        Malformed usernames cannot belong to anyone, so they simply
        resolve to None.

        Args:
            username: Raw username

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_username", username=username):
            try:
                value = Username(username)
            except ValueError:
                logfire.warn("Malformed username", username=username)
                return None

            user = await self.user_repository.find_by_username(value)
            if not user:
                logfire.warn("User not found", username=username)
            return user

    async def touch_last_activity(self, user_id: UserId) -> bool:
        """Record that the user was active just now.

        Args:
            user_id: User ID

        Returns:
            True if the timestamp was written, False if the user does not exist
        """
        with logfire.span("user_service.touch_last_activity", user_id=user_id):
            touched = await self.user_repository.touch_last_active(user_id, utcnow())
            if not touched:
                logfire.warn("Last activity not updated", user_id=user_id)
            return touched
