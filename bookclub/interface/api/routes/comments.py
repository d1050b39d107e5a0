"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from bookclub.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentResponse,
    GetCommentUseCase,
    GetRepliesRequest,
    GetRepliesResponse,
    GetRepliesUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from bookclub.domain.service import JWTService
from bookclub.interface.api.auth import require_user_id

router = APIRouter(prefix="/api/v1/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    post_id: str
    content: str = Field(min_length=1)
    parent_id: str | None = None  # Parent comment ID for replies


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    content: str = Field(min_length=1)


@router.post(
    "",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Create a comment on a post or reply to another comment.

    Requires authentication.
    """
    user_id = require_user_id(jwt_service, auth_token, "create comments")
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            user_id=user_id,
            post_id=request.post_id,
            content=request.content,
            parent_id=request.parent_id,
        )
    )


@router.get("/{comment_id}", response_model=GetCommentResponse)
async def get_comment(
    comment_id: str,
    get_comment_use_case: FromDishka[GetCommentUseCase],
) -> GetCommentResponse:
    """Get a comment with its full reply tree."""
    return await get_comment_use_case.execute(GetCommentRequest(comment_id=comment_id))


@router.get("/{comment_id}/replies", response_model=GetRepliesResponse)
async def get_replies(
    comment_id: str,
    get_replies_use_case: FromDishka[GetRepliesUseCase],
) -> GetRepliesResponse:
    """Get every reply below a comment, nested, oldest first per level."""
    return await get_replies_use_case.execute(GetRepliesRequest(comment_id=comment_id))


@router.patch("/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    comment_id: str,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateCommentResponse:
    """Update a comment's content.

    Only the comment author can edit.
    """
    user_id = require_user_id(jwt_service, auth_token, "edit comments")
    return await update_comment_use_case.execute(
        UpdateCommentRequest(
            user_id=user_id,
            comment_id=comment_id,
            content=request.content,
        )
    )


@router.delete("/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Delete a comment and every reply below it.

    Only the comment author can delete.
    """
    user_id = require_user_id(jwt_service, auth_token, "delete comments")
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(user_id=user_id, comment_id=comment_id)
    )
