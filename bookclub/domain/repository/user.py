"""User repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Iterable, Optional

from bookclub.domain.model.user import User
from bookclub.domain.value import UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        """Find several users at once.

        Args:
            user_ids: Identifiers to look up (duplicates are fine)

        Returns:
            Mapping of found user IDs to users; unknown IDs are absent
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username.

        Args:
            username: The user's username

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def touch_last_active(self, user_id: UserId, at: datetime) -> bool:
        """Set the user's last-activity timestamp.

        Args:
            user_id: The user's unique identifier
            at: New last-activity timestamp

        Returns:
            True if a row was updated, False otherwise
        """
        pass
