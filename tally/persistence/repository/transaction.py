"""SQLAlchemy session-backed transaction manager."""

from sqlalchemy.ext.asyncio import AsyncSession

from tally.domain.repository import TransactionManager


class PostgresTransactionManager(TransactionManager):
    """Commits the request-scoped session shared by the repositories."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def commit(self) -> None:
        await self.session.commit()
