"""Strongly typed identifiers for Tally domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Ledger identifiers
VoteId = NewType("VoteId", UUID)
VoterId = NewType("VoterId", str)  # Opaque, supplied by the identity provider

# Entity store identifiers (serial integer keys)
SubjectId = NewType("SubjectId", int)
ContractId = NewType("ContractId", int)
LetterOfCreditId = NewType("LetterOfCreditId", int)
VesselId = NewType("VesselId", int)
VesselLetterOfCreditId = NewType("VesselLetterOfCreditId", int)
RequestId = NewType("RequestId", int)
DocumentId = NewType("DocumentId", int)
