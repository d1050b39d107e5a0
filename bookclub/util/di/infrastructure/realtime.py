"""Real-time push infrastructure providers."""

from dishka import Scope, provide

from bookclub.adapter.realtime import ConnectionManager
from bookclub.domain.service import RealtimeNotifier
from bookclub.util.di.base import ProviderBase


class RealtimeProvider(ProviderBase):
    """Realtime component base."""

    __mock_component__ = "realtime"


class ProdRealtimeProvider(RealtimeProvider):
    """Production realtime provider pushing over WebSockets.

    One connection registry per process, shared by the WebSocket endpoint
    and every request that sends a message.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_connection_manager(self) -> ConnectionManager:
        """Provide the WebSocket connection registry."""
        return ConnectionManager()

    @provide(scope=Scope.APP)
    def get_notifier(self, manager: ConnectionManager) -> RealtimeNotifier:
        """Provide the notifier backed by the connection registry."""
        return manager
