"""In-memory transaction manager for testing."""

from tally.domain.repository.transaction import TransactionManager


class InMemoryTransactionManager(TransactionManager):
    """Writes to in-memory repositories are immediately visible.

    Counts commits so tests can check a mutation was committed.
    """

    def __init__(self) -> None:
        self.commits = 0

    async def commit(self) -> None:
        self.commits += 1
