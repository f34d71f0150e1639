"""In-memory repository implementations for testing."""

from .contract import InMemoryContractRepository
from .document import InMemoryDocumentRepository
from .letter_of_credit import InMemoryLetterOfCreditRepository
from .request import InMemoryRequestRepository
from .transaction import InMemoryTransactionManager
from .vessel import InMemoryVesselRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryContractRepository",
    "InMemoryDocumentRepository",
    "InMemoryLetterOfCreditRepository",
    "InMemoryRequestRepository",
    "InMemoryTransactionManager",
    "InMemoryVesselRepository",
    "InMemoryVoteRepository",
]
