"""Post entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from bookclub.domain.model.common import DomainModel, utcnow
from bookclub.domain.value import PostId, UserId


class Post(DomainModel):
    """A post that comments hang off."""

    id: PostId
    author_id: UserId
    content: str = Field(min_length=1)
    created_at: datetime = Field(default_factory=utcnow)
    modified_at: Optional[datetime] = None
