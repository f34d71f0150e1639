"""Repository interfaces for Tally domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from tally.domain.repository.contract import ContractRepository
from tally.domain.repository.document import DocumentRepository
from tally.domain.repository.letter_of_credit import LetterOfCreditRepository
from tally.domain.repository.request import RequestRepository
from tally.domain.repository.transaction import TransactionManager
from tally.domain.repository.vessel import VesselRepository
from tally.domain.repository.vote import VoteRepository

__all__ = [
    "ContractRepository",
    "DocumentRepository",
    "LetterOfCreditRepository",
    "RequestRepository",
    "TransactionManager",
    "VesselRepository",
    "VoteRepository",
]
