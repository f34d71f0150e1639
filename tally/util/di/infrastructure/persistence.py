"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from tally.config import Settings
from tally.domain.repository import (
    ContractRepository,
    DocumentRepository,
    LetterOfCreditRepository,
    RequestRepository,
    TransactionManager,
    VesselRepository,
    VoteRepository,
)
from tally.persistence.database import create_engine, create_session_factory
from tally.persistence.repository import (
    PostgresContractRepository,
    PostgresDocumentRepository,
    PostgresLetterOfCreditRepository,
    PostgresRequestRepository,
    PostgresTransactionManager,
    PostgresVesselRepository,
    PostgresVoteRepository,
)
from tally.util.di.base import ProviderBase
from tally.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Anything not yet committed by a service is committed at the end of
        the request if no exception occurred, or rolled back otherwise.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_transaction_manager(self, session: AsyncSession) -> TransactionManager:
        """Provide transaction manager bound to the request session."""
        return PostgresTransactionManager(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        """Provide Vote ledger."""
        return PostgresVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_contract_repository(self, session: AsyncSession) -> ContractRepository:
        """Provide Contract repository."""
        return PostgresContractRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_request_repository(self, session: AsyncSession) -> RequestRepository:
        """Provide Request repository."""
        return PostgresRequestRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_document_repository(self, session: AsyncSession) -> DocumentRepository:
        """Provide Document repository."""
        return PostgresDocumentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_letter_of_credit_repository(
        self, session: AsyncSession
    ) -> LetterOfCreditRepository:
        """Provide LetterOfCredit repository."""
        return PostgresLetterOfCreditRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vessel_repository(self, session: AsyncSession) -> VesselRepository:
        """Provide Vessel repository."""
        return PostgresVesselRepository(session)
