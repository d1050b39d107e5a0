"""Domain layer DI providers."""

from dishka import Scope, provide

from bookclub.config import AuthSettings, RealtimeSettings, Settings
from bookclub.domain.repository import (
    CommentRepository,
    MessageRepository,
    PostRepository,
    UnitOfWork,
    UserRepository,
)
from bookclub.domain.service import (
    CommentService,
    JWTService,
    MessageService,
    PostService,
    RealtimeNotifier,
    UserService,
)
from bookclub.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        user_repository: UserRepository,
        settings: Settings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            post_repository=post_repository,
            user_repository=user_repository,
            max_content_length=settings.comments.max_length,
        )

    @provide
    def get_message_service(
        self,
        message_repository: MessageRepository,
        user_repository: UserRepository,
        unit_of_work: UnitOfWork,
        notifier: RealtimeNotifier,
        realtime_settings: RealtimeSettings,
        settings: Settings,
    ) -> MessageService:
        """Provide message domain service."""
        return MessageService(
            message_repository=message_repository,
            user_repository=user_repository,
            unit_of_work=unit_of_work,
            notifier=notifier,
            message_event=realtime_settings.message_event,
            max_content_length=settings.messages.max_length,
        )
