"""Domain services."""

from .base import Service
from .comment_service import CommentListing, CommentNode, CommentService
from .jwt_service import JWTService
from .message_service import MessageService, MessageView, user_summary
from .notifier import RealtimeNotifier
from .post_service import PostService
from .user_service import UserService

__all__ = [
    "CommentListing",
    "CommentNode",
    "CommentService",
    "JWTService",
    "MessageService",
    "MessageView",
    "PostService",
    "RealtimeNotifier",
    "Service",
    "UserService",
    "user_summary",
]
