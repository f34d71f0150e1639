"""PostgreSQL implementation of the vote ledger."""

from typing import List, Optional

import logfire
from sqlalchemy import and_, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tally.domain.error import DuplicateVoterError
from tally.domain.model import Vote
from tally.domain.repository import VoteRepository
from tally.domain.value import SubjectId, SubjectType, VoteDecision, VoterId
from tally.persistence.mappers import row_to_vote, vote_to_dict
from tally.persistence.tables import VOTES_UNIQUE_VOTER_INDEX, votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository.

    The partial unique index on (subject_type, subject_id, voter_id) is what
    makes append() atomic: two concurrent inserts by the same voter cannot
    both commit, whatever the application saw beforehand.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def append(self, vote: Vote) -> Vote:
        """Insert a vote inside a savepoint.

        A duplicate only rolls back the savepoint, so the session stays
        usable and nothing else in the unit of work is lost.
        """
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            if VOTES_UNIQUE_VOTER_INDEX not in str(e.orig):
                raise
            logfire.warn(
                "Unique voter index rejected vote",
                subject_type=vote.subject_type.value,
                subject_id=vote.subject_id,
                voter_id=vote.voter_id,
            )
            raise DuplicateVoterError(
                vote.subject_type.value, vote.subject_id, vote.voter_id
            ) from e
        return vote

    async def list_by_subject(
        self, subject_type: SubjectType, subject_id: SubjectId
    ) -> List[Vote]:
        """List all votes on a subject, oldest first."""
        stmt = (
            select(votes_table)
            .where(
                and_(
                    votes_table.c.subject_type == subject_type.value,
                    votes_table.c.subject_id == subject_id,
                )
            )
            .order_by(votes_table.c.created_at.asc(), votes_table.c.id.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def find_by_voter(
        self,
        subject_type: SubjectType,
        subject_id: SubjectId,
        voter_id: VoterId,
    ) -> Optional[Vote]:
        """Find the decision a voter cast on a subject."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.subject_type == subject_type.value,
                votes_table.c.subject_id == subject_id,
                votes_table.c.voter_id == voter_id,
                votes_table.c.decision != VoteDecision.PENDING.value,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None
