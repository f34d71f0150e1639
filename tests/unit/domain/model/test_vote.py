"""Unit tests for the Vote entity."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from tally.domain.model import Vote
from tally.domain.value import SubjectId, SubjectType, VoteDecision, VoteId, VoterId


def _vote(decision: VoteDecision, comment: str | None) -> Vote:
    return Vote(
        id=VoteId(uuid4()),
        subject_type=SubjectType.REQUEST,
        subject_id=SubjectId(1),
        voter_id=VoterId("manager-1"),
        decision=decision,
        comment=comment,
    )


def test_rejection_without_comment_is_invalid():
    with pytest.raises(ValidationError, match="comment required"):
        _vote(VoteDecision.REJECT, "  ")


def test_approval_without_comment_is_valid():
    vote = _vote(VoteDecision.APPROVE, None)

    assert vote.created_at.tzinfo is not None


def test_vote_is_immutable():
    vote = _vote(VoteDecision.APPROVE, None)

    with pytest.raises(ValidationError):
        vote.decision = VoteDecision.REJECT
