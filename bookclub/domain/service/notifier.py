"""Real-time notification port."""

from abc import ABC, abstractmethod
from typing import Any

from bookclub.domain.value import UserId


class RealtimeNotifier(ABC):
    """Out-of-band push channel to connected clients.

    Delivery is best-effort: implementations must return immediately,
    never raise for an unreachable or offline user, and give no
    acknowledgement back to the caller.
    """

    @abstractmethod
    def notify_user(self, user_id: UserId, event: str, payload: dict[str, Any]) -> None:
        """Queue an event for every live connection of a user.

        Args:
            user_id: Recipient
            event: Event name the client listens for
            payload: JSON-serializable body
        """
        pass
