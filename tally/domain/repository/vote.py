"""Vote ledger repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from tally.domain.model.vote import Vote
from tally.domain.value import SubjectId, SubjectType, VoterId


class VoteRepository(ABC):
    """Repository for the vote ledger.

    The ledger is append-only. Implementations must make the duplicate
    check and the insert in append() a single atomic unit per
    (subject_type, subject_id, voter_id), so that two concurrent submissions
    from the same voter can never both be recorded.
    """

    @abstractmethod
    async def append(self, vote: Vote) -> Vote:
        """Append a vote to the ledger.

        Pending placeholders are not subject to the one-vote-per-voter rule.

        Args:
            vote: The vote to record

        Returns:
            The recorded vote

        Raises:
            DuplicateVoterError: If the voter already cast a decision on
                this subject. The ledger is left unchanged.
        """
        pass

    @abstractmethod
    async def list_by_subject(
        self, subject_type: SubjectType, subject_id: SubjectId
    ) -> List[Vote]:
        """List all votes on a subject.

        Args:
            subject_type: Type of subject
            subject_id: ID of the subject

        Returns:
            Votes in creation order (oldest first)
        """
        pass

    @abstractmethod
    async def find_by_voter(
        self,
        subject_type: SubjectType,
        subject_id: SubjectId,
        voter_id: VoterId,
    ) -> Optional[Vote]:
        """Find the decision a voter cast on a subject.

        Pending placeholders are ignored.

        Args:
            subject_type: Type of subject
            subject_id: ID of the subject
            voter_id: The voter

        Returns:
            The vote if the voter has voted, None otherwise
        """
        pass
