"""Transaction boundary interface."""

from abc import ABC, abstractmethod


class TransactionManager(ABC):
    """Makes pending repository writes durable.

    Services commit before announcing a mutation, so that nobody is told
    about a change that could still be rolled back.
    """

    @abstractmethod
    async def commit(self) -> None:
        """Commit all writes made so far in the current unit of work."""
        pass
