"""Response models shared across use cases."""

from pydantic import BaseModel

from bookclub.domain.model import User


class UserSummary(BaseModel):
    """Public view of a user embedded in other responses."""

    id: str
    username: str
    profile_picture: str | None

    @classmethod
    def from_domain(cls, user: User | None) -> "UserSummary | None":
        if user is None:
            return None
        return cls(
            id=user.id,
            username=user.username.root,
            profile_picture=user.profile_picture,
        )
