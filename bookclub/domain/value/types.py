"""Domain value objects for Bookclub.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import math

from pydantic import field_validator

from bookclub.domain.error import ValidationError
from bookclub.domain.value.common import RootValueObject, ValueObject


class Username(RootValueObject[str]):
    """Public, unique user name shown next to comments and chats."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username is not blank and within length limits."""
        if not v.strip() or len(v) > 256:
            raise ValueError("Username must be 1-256 characters")
        return v


class Pagination(ValueObject):
    """One page of a listing, 1-based.

    ``offset`` is ``(page - 1) * limit`` and the page holds at most
    ``limit`` items.
    """

    page: int
    limit: int

    @classmethod
    def create(cls, page: int, limit: int, max_limit: int) -> "Pagination":
        """Build a page request, rejecting malformed parameters.

        Raises:
            ValidationError: If page < 1 or limit is outside 1..max_limit
        """
        if page < 1:
            raise ValidationError(f"Page must be at least 1, got {page}")
        if limit < 1 or limit > max_limit:
            raise ValidationError(
                f"Limit must be between 1 and {max_limit}, got {limit}"
            )
        return cls(page=page, limit=limit)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def pages_for(self, count: int) -> int:
        """Total number of pages needed to show ``count`` items."""
        return math.ceil(count / self.limit)
