"""User use cases."""

from .get_user import (
    GetUserByIdRequest,
    GetUserByIdUseCase,
    GetUserRequest,
    GetUserResponse,
    GetUserUseCase,
)
from .items import UserProfile
from .refresh_activity import (
    RefreshActivityRequest,
    RefreshActivityResponse,
    RefreshActivityUseCase,
)

__all__ = [
    "GetUserByIdRequest",
    "GetUserByIdUseCase",
    "GetUserRequest",
    "GetUserResponse",
    "GetUserUseCase",
    "RefreshActivityRequest",
    "RefreshActivityResponse",
    "RefreshActivityUseCase",
    "UserProfile",
]
