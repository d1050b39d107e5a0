"""Application layer DI providers."""

from dishka import Scope, provide

from bookclub.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentUseCase,
    GetPostCommentsUseCase,
    GetRepliesUseCase,
    GetUserCommentsUseCase,
    UpdateCommentUseCase,
)
from bookclub.application.usecase.message import (
    GetConversationUseCase,
    GetNotificationCountUseCase,
    GetRecentChatsUseCase,
    GetUserMessagesUseCase,
    ReadMessagesUseCase,
    SendMessageUseCase,
)
from bookclub.application.usecase.post import GetPostUseCase
from bookclub.application.usecase.user import (
    GetUserByIdUseCase,
    GetUserUseCase,
    RefreshActivityUseCase,
)
from bookclub.config import MessageSettings, PaginationSettings
from bookclub.domain.service import (
    CommentService,
    MessageService,
    PostService,
    UserService,
)
from bookclub.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_comment_use_case(self, comment_service: CommentService) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_replies_use_case(self, comment_service: CommentService) -> GetRepliesUseCase:
        """Provide get replies use case."""
        return GetRepliesUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_post_comments_use_case(
        self,
        comment_service: CommentService,
        pagination_settings: PaginationSettings,
    ) -> GetPostCommentsUseCase:
        """Provide get post comments use case."""
        return GetPostCommentsUseCase(
            comment_service=comment_service,
            pagination_settings=pagination_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_user_comments_use_case(
        self,
        comment_service: CommentService,
        pagination_settings: PaginationSettings,
    ) -> GetUserCommentsUseCase:
        """Provide get comments by user use case."""
        return GetUserCommentsUseCase(
            comment_service=comment_service,
            pagination_settings=pagination_settings,
        )

    # Message use cases
    @provide(scope=Scope.REQUEST)
    def get_send_message_use_case(
        self, message_service: MessageService
    ) -> SendMessageUseCase:
        """Provide send message use case."""
        return SendMessageUseCase(message_service=message_service)

    @provide(scope=Scope.REQUEST)
    def get_conversation_use_case(
        self,
        message_service: MessageService,
        pagination_settings: PaginationSettings,
        message_settings: MessageSettings,
    ) -> GetConversationUseCase:
        """Provide get conversation use case."""
        return GetConversationUseCase(
            message_service=message_service,
            pagination_settings=pagination_settings,
            message_settings=message_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_user_messages_use_case(
        self, message_service: MessageService
    ) -> GetUserMessagesUseCase:
        """Provide get user messages use case."""
        return GetUserMessagesUseCase(message_service=message_service)

    @provide(scope=Scope.REQUEST)
    def get_recent_chats_use_case(
        self, message_service: MessageService
    ) -> GetRecentChatsUseCase:
        """Provide get recent chats use case."""
        return GetRecentChatsUseCase(message_service=message_service)

    @provide(scope=Scope.REQUEST)
    def get_read_messages_use_case(
        self, message_service: MessageService
    ) -> ReadMessagesUseCase:
        """Provide read messages use case."""
        return ReadMessagesUseCase(message_service=message_service)

    @provide(scope=Scope.REQUEST)
    def get_notification_count_use_case(
        self, message_service: MessageService
    ) -> GetNotificationCountUseCase:
        """Provide notification count use case."""
        return GetNotificationCountUseCase(message_service=message_service)

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_user_use_case(self, user_service: UserService) -> GetUserUseCase:
        """Provide get user by username use case."""
        return GetUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_user_by_id_use_case(self, user_service: UserService) -> GetUserByIdUseCase:
        """Provide get user by ID use case."""
        return GetUserByIdUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_refresh_activity_use_case(
        self, user_service: UserService
    ) -> RefreshActivityUseCase:
        """Provide refresh activity use case."""
        return RefreshActivityUseCase(user_service=user_service)
