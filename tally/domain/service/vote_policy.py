"""Vote policy rules.

Pure functions: nothing here touches storage, so the rules can be checked
and tested independently of the ledger.
"""

from typing import Iterable

from tally.domain.error import ValidationError
from tally.domain.model.document import Document
from tally.domain.model.vote import Vote
from tally.domain.value import (
    AggregateDecision,
    AggregateStatus,
    SubjectType,
    VoteDecision,
)


def parse_decision(raw: VoteDecision | str) -> VoteDecision:
    """Parse a caller-supplied decision.

    Args:
        raw: Decision or one of its string aliases (yes/no/accept)

    Returns:
        The decision

    Raises:
        ValidationError: If the decision is unknown or is not one a voter
            may cast
    """
    try:
        decision = VoteDecision.parse(raw)
    except ValueError as e:
        raise ValidationError(str(e))

    if not decision.is_cast:
        raise ValidationError("pending is not a decision a voter can cast")
    return decision


def validate_submission(decision: VoteDecision, comment: str | None) -> str | None:
    """Check a submission against the comment rule.

    Args:
        decision: The decision being cast
        comment: Free-form comment from the voter

    Returns:
        The comment with surrounding whitespace removed, None if blank

    Raises:
        ValidationError: If a rejection has no comment
    """
    normalized = comment.strip() if comment else ""
    if decision is VoteDecision.REJECT and not normalized:
        raise ValidationError("comment required on rejection")
    return normalized or None


def document_reference(
    subject_type: SubjectType,
    document: Document | None,
    file_name: str | None,
    file_path: str | None,
) -> tuple[str | None, str | None]:
    """Decide the document reference a vote is stored with.

    Only votes cast on a document carry a reference, and it is always the
    document's own. A caller may echo the reference back but never
    override it.

    Args:
        subject_type: Type of subject being voted on
        document: The resolved document, when voting on one
        file_name: File name supplied by the caller, if any
        file_path: File path supplied by the caller, if any

    Returns:
        (file_name, file_path) to record on the vote

    Raises:
        ValidationError: If a reference is supplied for a contract or
            request, or does not match the document
    """
    if subject_type is not SubjectType.DOCUMENT:
        if file_name is not None or file_path is not None:
            raise ValidationError(
                "file reference only allowed on document votes, "
                "vote on the document instead"
            )
        return None, None

    if document is None:
        raise ValueError("document votes need the resolved document")
    if file_name is not None and file_name != document.file_name:
        raise ValidationError("file_name does not match the document")
    if file_path is not None and file_path != document.file_path:
        raise ValidationError("file_path does not match the document")
    return document.file_name, document.file_path


def aggregate_decision(votes: Iterable[Vote]) -> AggregateDecision:
    """Compute the overall decision for a slice of votes.

    Precedence: any rejection wins, then any pending placeholder, then any
    approval. The result depends only on the multiset of decisions, never
    on their order.

    Args:
        votes: All votes on one subject

    Returns:
        Tally and derived status
    """
    approvals = rejections = pending = 0
    for vote in votes:
        if vote.decision is VoteDecision.APPROVE:
            approvals += 1
        elif vote.decision is VoteDecision.REJECT:
            rejections += 1
        elif vote.decision is VoteDecision.PENDING:
            pending += 1
        else:
            raise ValueError(f"Unhandled vote decision: {vote.decision!r}")

    if rejections:
        status = AggregateStatus.REJECTED
    elif pending:
        status = AggregateStatus.PENDING_REVIEW
    elif approvals:
        status = AggregateStatus.APPROVED
    else:
        status = AggregateStatus.NO_VOTES

    return AggregateDecision(
        status=status,
        approvals=approvals,
        rejections=rejections,
        pending=pending,
    )
