"""Get user use cases."""

from pydantic import BaseModel

from bookclub.domain.error import NotFoundError
from bookclub.domain.service import UserService
from bookclub.domain.value import UserId

from .items import UserProfile


class GetUserRequest(BaseModel):
    """Get user by username request."""

    username: str


class GetUserByIdRequest(BaseModel):
    """Get user by ID request."""

    user_id: str


class GetUserResponse(UserProfile):
    """Get user response."""


class GetUserUseCase:
    """Use case for looking up a public profile by username."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserRequest) -> GetUserResponse:
        """Execute get user flow.

        Raises:
            NotFoundError: If no user has that username
        """
        user = await self.user_service.get_user_by_username(request.username)
        if not user:
            raise NotFoundError("User", request.username)
        return GetUserResponse(**dict(UserProfile.from_domain(user)))


class GetUserByIdUseCase:
    """Use case for looking up a public profile by ID."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetUserByIdRequest) -> GetUserResponse:
        user = await self.user_service.get_by_id(UserId(request.user_id))
        return GetUserResponse(**dict(UserProfile.from_domain(user)))
