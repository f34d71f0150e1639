"""PostgreSQL repository implementations."""

from tally.persistence.repository.contract import PostgresContractRepository
from tally.persistence.repository.document import PostgresDocumentRepository
from tally.persistence.repository.letter_of_credit import (
    PostgresLetterOfCreditRepository,
)
from tally.persistence.repository.request import PostgresRequestRepository
from tally.persistence.repository.transaction import PostgresTransactionManager
from tally.persistence.repository.vessel import PostgresVesselRepository
from tally.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresContractRepository",
    "PostgresDocumentRepository",
    "PostgresLetterOfCreditRepository",
    "PostgresRequestRepository",
    "PostgresTransactionManager",
    "PostgresVesselRepository",
    "PostgresVoteRepository",
]
