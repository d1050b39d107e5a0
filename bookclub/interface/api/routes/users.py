"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query

from bookclub.application.usecase.comment import (
    CommentPage,
    GetUserCommentsRequest,
    GetUserCommentsUseCase,
)
from bookclub.application.usecase.user import (
    GetUserByIdRequest,
    GetUserByIdUseCase,
    GetUserRequest,
    GetUserResponse,
    GetUserUseCase,
    RefreshActivityRequest,
    RefreshActivityResponse,
    RefreshActivityUseCase,
)
from bookclub.domain.service import JWTService
from bookclub.interface.api.auth import require_user_id

router = APIRouter(prefix="/api/v1/users", tags=["users"], route_class=DishkaRoute)


@router.post("/refresh", response_model=RefreshActivityResponse)
async def refresh_activity(
    refresh_activity_use_case: FromDishka[RefreshActivityUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> RefreshActivityResponse:
    """Stamp the caller as active now.

    Clients call this periodically so chat lists can show who is around.
    """
    user_id = require_user_id(jwt_service, auth_token, "refresh activity")
    return await refresh_activity_use_case.execute(
        RefreshActivityRequest(user_id=user_id)
    )


@router.get("/id/{user_id}", response_model=GetUserResponse)
async def get_user_by_id(
    user_id: str,
    get_user_by_id_use_case: FromDishka[GetUserByIdUseCase],
) -> GetUserResponse:
    """Get a user's public profile by ID."""
    return await get_user_by_id_use_case.execute(GetUserByIdRequest(user_id=user_id))


@router.get("/{username}", response_model=GetUserResponse)
async def get_user(
    username: str,
    get_user_use_case: FromDishka[GetUserUseCase],
) -> GetUserResponse:
    """Get a user's public profile by username."""
    return await get_user_use_case.execute(GetUserRequest(username=username))


@router.get("/{username}/comments", response_model=CommentPage)
async def get_user_comments(
    username: str,
    get_user_comments_use_case: FromDishka[GetUserCommentsUseCase],
    page: int = Query(default=1),
    limit: int | None = Query(default=None),
) -> CommentPage:
    """Get one page of a user's comments, newest first.

    An unknown username returns an empty page.
    """
    return await get_user_comments_use_case.execute(
        GetUserCommentsRequest(username=username, page=page, limit=limit)
    )
