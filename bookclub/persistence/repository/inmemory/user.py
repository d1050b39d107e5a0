"""In-memory user repository for testing."""

from datetime import datetime
from typing import Iterable, Optional

from bookclub.domain.model.user import User
from bookclub.domain.repository.user import UserRepository
from bookclub.domain.value import UserId, Username

from .database import InMemoryDatabase


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self._db = db

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._db.users.get(user_id)

    async def find_by_ids(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        """Find several users, keyed by ID."""
        return {
            user_id: self._db.users[user_id]
            for user_id in set(user_ids)
            if user_id in self._db.users
        }

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username."""
        for user in self._db.users.values():
            if user.username == username:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save a user."""
        self._db.users[user.id] = user
        return user

    async def touch_last_active(self, user_id: UserId, at: datetime) -> bool:
        """Stamp the user's last activity time."""
        user = self._db.users.get(user_id)
        if not user:
            return False
        self._db.users[user_id] = user.model_copy(update={"last_active_at": at})
        return True
