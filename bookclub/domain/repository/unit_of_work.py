"""Unit of work interface."""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """Transaction boundary shared by the repositories of one request.

    Writes stay pending until ``commit``. Anything not committed explicitly
    is committed when the request finishes, or rolled back if it fails.
    """

    @abstractmethod
    async def commit(self) -> None:
        """Make every pending write durable and visible to other requests."""
        pass
