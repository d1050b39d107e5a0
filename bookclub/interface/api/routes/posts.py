"""Post routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from bookclub.application.usecase.comment import (
    CommentPage,
    GetPostCommentsRequest,
    GetPostCommentsUseCase,
)
from bookclub.application.usecase.post import (
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
)

router = APIRouter(prefix="/api/v1/posts", tags=["posts"], route_class=DishkaRoute)


@router.get("/{post_id}", response_model=GetPostResponse)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> GetPostResponse:
    """Get the post a comment thread belongs to."""
    return await get_post_use_case.execute(GetPostRequest(post_id=post_id))


@router.get("/{post_id}/comments", response_model=CommentPage)
async def get_post_comments(
    post_id: str,
    get_post_comments_use_case: FromDishka[GetPostCommentsUseCase],
    page: int = Query(default=1),
    limit: int | None = Query(default=None),
) -> CommentPage:
    """Get one page of a post's top-level comments, newest first.

    Replies are not included; each item carries its ``reply_count``.
    """
    return await get_post_comments_use_case.execute(
        GetPostCommentsRequest(post_id=post_id, page=page, limit=limit)
    )
