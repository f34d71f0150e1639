"""Integration tests for PostgresVoteRepository.

These tests verify that the unique voter index, not the application, is
what keeps the ledger at one cast decision per voter.
"""

import os
import random

import pytest

from tally.domain.error import DuplicateVoterError
from tally.domain.repository import VoteRepository
from tally.domain.value import SubjectId, SubjectType, VoteDecision, VoterId
from tests.conftest import make_vote
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.getenv("DATABASE__URL"), reason="DATABASE__URL not set"
)

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


def _subject_id() -> int:
    # Rows are committed, so every test votes on a fresh subject
    return random.randint(1_000_000, 2_000_000_000)


class TestVoteRepositoryIntegration:
    """Integration tests for PostgresVoteRepository."""

    @pytest.mark.asyncio
    async def test_unique_index_rejects_second_decision(self, integration_env):
        vote_repo = await integration_env.get(VoteRepository)
        subject_id = _subject_id()

        await vote_repo.append(
            make_vote(VoteDecision.APPROVE, voter_id="manager-1", subject_id=subject_id)
        )

        with pytest.raises(DuplicateVoterError):
            await vote_repo.append(
                make_vote(
                    VoteDecision.REJECT, voter_id="manager-1", subject_id=subject_id
                )
            )

        # The savepoint kept the session usable
        votes = await vote_repo.list_by_subject(
            SubjectType.CONTRACT, SubjectId(subject_id)
        )
        assert [v.decision for v in votes] == [VoteDecision.APPROVE]

    @pytest.mark.asyncio
    async def test_pending_placeholder_is_exempt(self, integration_env):
        vote_repo = await integration_env.get(VoteRepository)
        subject_id = _subject_id()

        await vote_repo.append(
            make_vote(
                VoteDecision.PENDING,
                voter_id="clerk-1",
                subject_type=SubjectType.DOCUMENT,
                subject_id=subject_id,
            )
        )
        await vote_repo.append(
            make_vote(
                VoteDecision.APPROVE,
                voter_id="clerk-1",
                subject_type=SubjectType.DOCUMENT,
                subject_id=subject_id,
            )
        )

        cast = await vote_repo.find_by_voter(
            SubjectType.DOCUMENT, SubjectId(subject_id), VoterId("clerk-1")
        )
        assert cast is not None
        assert cast.decision is VoteDecision.APPROVE
