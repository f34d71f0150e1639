"""Domain value types for Tally.

Every status the core reasons about is a closed enum. Raw strings coming from
callers or from storage are parsed here and nowhere else, so an unknown value
can never silently fall through to a default.
"""

from enum import Enum


class SubjectType(str, Enum):
    """Type of entity a vote is cast against."""

    CONTRACT = "contract"
    DOCUMENT = "document"
    REQUEST = "request"


class VoteDecision(str, Enum):
    """A single voter's decision.

    PENDING is never cast by a voter. It marks an uploaded document that has
    not been voted on yet; those placeholder rows are written by the upload
    flow, the core only tallies them.
    """

    APPROVE = "approve"
    REJECT = "reject"
    PENDING = "pending"

    @classmethod
    def parse(cls, raw: str) -> "VoteDecision":
        """Parse a decision string, accepting the yes/no/accept aliases.

        Args:
            raw: Decision as supplied by a caller or read from storage

        Returns:
            The matching decision

        Raises:
            ValueError: If the string is not a known decision or alias
        """
        decision = _DECISION_ALIASES.get(raw.strip().lower())
        if decision is None:
            raise ValueError(f"Unrecognized vote decision: {raw!r}")
        return decision

    @property
    def is_cast(self) -> bool:
        """Whether this decision was cast by a voter."""
        return self is not VoteDecision.PENDING


# Contract and request opinions historically used yes/no, document
# upload voting used accept/reject.
_DECISION_ALIASES: dict[str, VoteDecision] = {
    "approve": VoteDecision.APPROVE,
    "yes": VoteDecision.APPROVE,
    "accept": VoteDecision.APPROVE,
    "reject": VoteDecision.REJECT,
    "no": VoteDecision.REJECT,
    "pending": VoteDecision.PENDING,
}


class AggregateStatus(str, Enum):
    """Overall approval state of a subject, derived from its votes."""

    REJECTED = "rejected"
    PENDING_REVIEW = "pending_review"
    APPROVED = "approved"
    NO_VOTES = "no_votes"


class AllocatableEntityType(str, Enum):
    """Entities whose declared quantity is consumed by vessel allocations."""

    CONTRACT = "contract"
    LETTER_OF_CREDIT = "letter_of_credit"


class AllocationProgress(str, Enum):
    """How far an allocatable entity's capacity has been consumed."""

    STARTED = "started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
