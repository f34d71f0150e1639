"""Unit tests for the in-memory vote ledger."""

import asyncio

import pytest

from tally.domain.error import DuplicateVoterError
from tally.domain.value import SubjectId, SubjectType, VoteDecision, VoterId
from tally.persistence.repository.inmemory import InMemoryVoteRepository
from tests.conftest import make_vote


@pytest.mark.asyncio
async def test_concurrent_appends_by_one_voter_keep_one():
    ledger = InMemoryVoteRepository()
    votes = [make_vote(VoteDecision.APPROVE, voter_id="manager-1") for _ in range(10)]

    results = await asyncio.gather(
        *(ledger.append(v) for v in votes), return_exceptions=True
    )

    assert sum(not isinstance(r, Exception) for r in results) == 1
    assert all(
        isinstance(r, DuplicateVoterError) for r in results if isinstance(r, Exception)
    )
    assert len(await ledger.list_by_subject(SubjectType.CONTRACT, SubjectId(1))) == 1


@pytest.mark.asyncio
async def test_pending_placeholders_are_exempt():
    ledger = InMemoryVoteRepository()

    await ledger.append(make_vote(VoteDecision.PENDING, voter_id="manager-1"))
    await ledger.append(make_vote(VoteDecision.PENDING, voter_id="manager-1"))
    await ledger.append(make_vote(VoteDecision.APPROVE, voter_id="manager-1"))

    cast = await ledger.find_by_voter(
        SubjectType.CONTRACT, SubjectId(1), VoterId("manager-1")
    )
    assert cast.decision is VoteDecision.APPROVE
    assert len(await ledger.list_by_subject(SubjectType.CONTRACT, SubjectId(1))) == 3


@pytest.mark.asyncio
async def test_subjects_are_independent():
    ledger = InMemoryVoteRepository()

    await ledger.append(make_vote(VoteDecision.APPROVE, subject_id=1))
    await ledger.append(make_vote(VoteDecision.APPROVE, subject_id=2))
    await ledger.append(
        make_vote(VoteDecision.APPROVE, subject_type=SubjectType.REQUEST, subject_id=1)
    )

    assert len(await ledger.list_by_subject(SubjectType.CONTRACT, SubjectId(1))) == 1
    assert len(await ledger.list_by_subject(SubjectType.REQUEST, SubjectId(1))) == 1
