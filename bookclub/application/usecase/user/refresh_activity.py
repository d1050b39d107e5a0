"""Refresh activity use case."""

from datetime import datetime

from pydantic import BaseModel

from bookclub.domain.error import NotFoundError
from bookclub.domain.service import UserService
from bookclub.domain.value import UserId


class RefreshActivityRequest(BaseModel):
    """Refresh activity request."""

    user_id: str  # From authenticated caller


class RefreshActivityResponse(BaseModel):
    """The caller's new last activity time."""

    user_id: str
    last_active_at: datetime


class RefreshActivityUseCase:
    """Use case for clients reporting that the caller is still around."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: RefreshActivityRequest) -> RefreshActivityResponse:
        """Execute refresh activity flow.

        Raises:
            NotFoundError: If the caller has no user record
        """
        user_id = UserId(request.user_id)
        if not await self.user_service.touch_last_activity(user_id):
            raise NotFoundError("User", user_id)

        user = await self.user_service.get_by_id(user_id)
        return RefreshActivityResponse(
            user_id=user.id, last_active_at=user.last_active_at
        )
