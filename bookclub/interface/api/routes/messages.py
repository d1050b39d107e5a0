"""Direct message routes.

Every route acts on behalf of the authenticated caller.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, Field

from bookclub.application.usecase.message import (
    GetConversationRequest,
    GetConversationResponse,
    GetConversationUseCase,
    GetNotificationCountRequest,
    GetNotificationCountResponse,
    GetNotificationCountUseCase,
    GetRecentChatsRequest,
    GetRecentChatsResponse,
    GetRecentChatsUseCase,
    GetUserMessagesRequest,
    GetUserMessagesResponse,
    GetUserMessagesUseCase,
    ReadMessagesRequest,
    ReadMessagesResponse,
    ReadMessagesUseCase,
    SendMessageRequest,
    SendMessageResponse,
    SendMessageUseCase,
)
from bookclub.domain.service import JWTService
from bookclub.interface.api.auth import require_user_id

router = APIRouter(prefix="/api/v1/messages", tags=["messages"], route_class=DishkaRoute)


class SendMessageAPIRequest(BaseModel):
    """API request for sending a message."""

    content: str = Field(min_length=1)


@router.post(
    "/send/{receiver_id}",
    response_model=SendMessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def send_message(
    receiver_id: str,
    request: SendMessageAPIRequest,
    send_message_use_case: FromDishka[SendMessageUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> SendMessageResponse:
    """Send a direct message; the receiver gets it pushed if connected."""
    user_id = require_user_id(jwt_service, auth_token, "send messages")
    return await send_message_use_case.execute(
        SendMessageRequest(
            sender_id=user_id,
            receiver_id=receiver_id,
            content=request.content,
        )
    )


@router.get("", response_model=GetUserMessagesResponse)
async def get_user_messages(
    get_user_messages_use_case: FromDishka[GetUserMessagesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetUserMessagesResponse:
    """Get every message the caller has received."""
    user_id = require_user_id(jwt_service, auth_token, "read messages")
    return await get_user_messages_use_case.execute(
        GetUserMessagesRequest(user_id=user_id)
    )


@router.get("/conversation/{user_id}", response_model=GetConversationResponse)
async def get_conversation(
    user_id: str,
    get_conversation_use_case: FromDishka[GetConversationUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1),
    limit: int | None = Query(default=None),
    auth_token: str | None = Cookie(default=None),
) -> GetConversationResponse:
    """Get one page of the conversation with another user.

    Page 1 holds the latest messages; each page is oldest first.
    """
    caller_id = require_user_id(jwt_service, auth_token, "read messages")
    return await get_conversation_use_case.execute(
        GetConversationRequest(
            user_id=caller_id, other_id=user_id, page=page, limit=limit
        )
    )


@router.get("/recent-chats", response_model=GetRecentChatsResponse)
async def get_recent_chats(
    get_recent_chats_use_case: FromDishka[GetRecentChatsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetRecentChatsResponse:
    """Get the caller's chat counterparts, latest conversation first."""
    user_id = require_user_id(jwt_service, auth_token, "read messages")
    return await get_recent_chats_use_case.execute(
        GetRecentChatsRequest(user_id=user_id)
    )


@router.patch("/read-messages/{sender_id}", response_model=ReadMessagesResponse)
async def read_messages(
    sender_id: str,
    read_messages_use_case: FromDishka[ReadMessagesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ReadMessagesResponse:
    """Mark everything ``sender_id`` sent to the caller as read."""
    user_id = require_user_id(jwt_service, auth_token, "read messages")
    return await read_messages_use_case.execute(
        ReadMessagesRequest(sender_id=sender_id, receiver_id=user_id)
    )


@router.get("/notification-count", response_model=GetNotificationCountResponse)
async def get_notification_count(
    get_notification_count_use_case: FromDishka[GetNotificationCountUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetNotificationCountResponse:
    """Get the number of unread messages addressed to the caller."""
    user_id = require_user_id(jwt_service, auth_token, "read messages")
    return await get_notification_count_use_case.execute(
        GetNotificationCountRequest(user_id=user_id)
    )
