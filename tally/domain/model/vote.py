"""Vote entity.

Votes record one user's opinion on one subject (a contract, a request or an
uploaded document). Each user casts at most one decision per subject and a
vote is never updated or deleted once recorded.
"""

from datetime import datetime, timezone

from pydantic import Field, model_validator

from tally.domain.model.common import DomainModel
from tally.domain.value import (
    AggregateDecision,
    DocumentId,
    SubjectId,
    SubjectType,
    VoteDecision,
    VoteId,
    VoterId,
)


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One cast decision per voter per subject (enforced by the ledger)
    - A rejection always carries a non-blank comment
    - Pending placeholders never count as the voter's decision
    """

    id: VoteId
    subject_type: SubjectType
    subject_id: SubjectId
    voter_id: VoterId
    decision: VoteDecision
    comment: str | None = None
    file_name: str | None = None  # Document reference, document votes only
    file_path: str | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @model_validator(mode="after")
    def require_comment_on_rejection(self) -> "Vote":
        """Reject votes must explain themselves."""
        if self.decision is VoteDecision.REJECT and not (self.comment or "").strip():
            raise ValueError("comment required on rejection")
        return self


class DocumentVoteGroup(DomainModel):
    """Votes cast on one uploaded document.

    Derived from the document and its vote slice, never persisted.
    """

    document_id: DocumentId
    file_name: str
    file_path: str
    uploaded_at: datetime | None
    votes: list[Vote]
    decision: AggregateDecision
