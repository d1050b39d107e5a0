"""User entity.

Only the fields the comment and messaging engines read are modelled here;
credentials live with the identity service.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from bookclub.domain.model.common import DomainModel, utcnow
from bookclub.domain.value import UserId, Username


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    username: Username
    profile_picture: Optional[str] = None
    biography: Optional[str] = None
    last_active_at: datetime = Field(default_factory=utcnow)
    created_at: datetime = Field(default_factory=utcnow)
