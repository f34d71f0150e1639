"""Domain value objects for Tally."""

from tally.domain.value.identifiers import (
    ContractId,
    DocumentId,
    LetterOfCreditId,
    RequestId,
    SubjectId,
    VesselId,
    VesselLetterOfCreditId,
    VoteId,
    VoterId,
)
from tally.domain.value.summary import (
    AggregateDecision,
    Allocation,
    AllocationSummary,
)
from tally.domain.value.types import (
    AggregateStatus,
    AllocatableEntityType,
    AllocationProgress,
    SubjectType,
    VoteDecision,
)

__all__ = [
    # Identifiers
    "VoteId",
    "VoterId",
    "SubjectId",
    "ContractId",
    "LetterOfCreditId",
    "VesselId",
    "VesselLetterOfCreditId",
    "RequestId",
    "DocumentId",
    # Types
    "SubjectType",
    "VoteDecision",
    "AggregateStatus",
    "AllocatableEntityType",
    "AllocationProgress",
    # Read models
    "AggregateDecision",
    "Allocation",
    "AllocationSummary",
]
