"""In-memory vote ledger for testing."""

import asyncio
from typing import Optional

from tally.domain.error import DuplicateVoterError
from tally.domain.model.vote import Vote
from tally.domain.repository.vote import VoteRepository
from tally.domain.value import SubjectId, SubjectType, VoterId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    The duplicate check and the insert run under one lock, standing in for
    the unique index of the Postgres ledger.
    """

    def __init__(self) -> None:
        self._votes: list[Vote] = []
        self._lock = asyncio.Lock()

    def _find_cast(
        self, subject_type: SubjectType, subject_id: SubjectId, voter_id: VoterId
    ) -> Optional[Vote]:
        for vote in self._votes:
            if (
                vote.subject_type == subject_type
                and vote.subject_id == subject_id
                and vote.voter_id == voter_id
                and vote.decision.is_cast
            ):
                return vote
        return None

    async def append(self, vote: Vote) -> Vote:
        """Append a vote.

        Raises:
            DuplicateVoterError: If the voter already cast a decision
        """
        async with self._lock:
            if vote.decision.is_cast:
                existing = self._find_cast(
                    vote.subject_type, vote.subject_id, vote.voter_id
                )
                if existing:
                    raise DuplicateVoterError(
                        vote.subject_type.value,
                        vote.subject_id,
                        vote.voter_id,
                        existing.id,
                    )
            self._votes.append(vote)
            return vote

    async def list_by_subject(
        self, subject_type: SubjectType, subject_id: SubjectId
    ) -> list[Vote]:
        """List votes on a subject, oldest first (ties keep insertion order)."""
        votes = [
            v
            for v in self._votes
            if v.subject_type == subject_type and v.subject_id == subject_id
        ]
        return sorted(votes, key=lambda v: v.created_at)

    async def find_by_voter(
        self,
        subject_type: SubjectType,
        subject_id: SubjectId,
        voter_id: VoterId,
    ) -> Optional[Vote]:
        """Find the decision a voter cast on a subject."""
        return self._find_cast(subject_type, subject_id, voter_id)
