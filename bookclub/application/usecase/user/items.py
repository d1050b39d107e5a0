"""User response models."""

from datetime import datetime

from pydantic import BaseModel

from bookclub.domain.model import User


class UserProfile(BaseModel):
    """Public profile of a user."""

    id: str
    username: str
    profile_picture: str | None
    biography: str | None
    last_active_at: datetime
    created_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserProfile":
        return cls(
            id=user.id,
            username=user.username.root,
            profile_picture=user.profile_picture,
            biography=user.biography,
            last_active_at=user.last_active_at,
            created_at=user.created_at,
        )
