"""Vote domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from tally.domain.error import DuplicateVoterError
from tally.domain.model import Document, DocumentVoteGroup, Vote
from tally.domain.repository import TransactionManager, VoteRepository
from tally.domain.value import (
    AggregateDecision,
    SubjectId,
    SubjectType,
    VoteDecision,
    VoteId,
    VoterId,
)

from .base import Service
from .notification import InvalidationBoundary
from .subject_resolver import SubjectResolver
from .vote_policy import (
    aggregate_decision,
    document_reference,
    parse_decision,
    validate_submission,
)


class VoteService(Service):
    """Domain service for approval voting."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        subject_resolver: SubjectResolver,
        transaction_manager: TransactionManager,
        invalidation: InvalidationBoundary,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote ledger
            subject_resolver: Subject resolution service
            transaction_manager: Commits ledger writes
            invalidation: Boundary notified after each recorded vote
        """
        self.vote_repository = vote_repository
        self.subject_resolver = subject_resolver
        self.transaction_manager = transaction_manager
        self.invalidation = invalidation

    async def submit_vote(
        self,
        subject_type: SubjectType,
        subject_id: SubjectId,
        voter_id: VoterId,
        decision: VoteDecision | str,
        comment: str | None = None,
        file_name: str | None = None,
        file_path: str | None = None,
    ) -> AggregateDecision:
        """Record a voter's decision on a subject.

        Args:
            subject_type: Type of subject
            subject_id: ID of the subject
            voter_id: The voter
            decision: approve or reject (or an accepted alias)
            comment: Free-form comment, required when rejecting
            file_name: Optional echo of the document's file name, document
                votes only
            file_path: Optional echo of the document's file path, document
                votes only

        Returns:
            The subject's aggregate decision including the new vote

        Raises:
            ValidationError: If the decision, comment or file reference is
                invalid
            NotFoundError: If the subject does not exist
            DuplicateVoterError: If the voter already voted on the subject
        """
        with logfire.span(
            "submit_vote",
            subject_type=subject_type.value,
            subject_id=subject_id,
            voter_id=voter_id,
        ):
            cast = parse_decision(decision)
            normalized_comment = validate_submission(cast, comment)

            subject = await self.subject_resolver.ensure_subject(
                subject_type, subject_id
            )
            file_name, file_path = document_reference(
                subject_type,
                subject if isinstance(subject, Document) else None,
                file_name,
                file_path,
            )

            existing = await self.vote_repository.find_by_voter(
                subject_type, subject_id, voter_id
            )
            if existing:
                logfire.warn(
                    "Duplicate vote attempt",
                    subject_type=subject_type.value,
                    subject_id=subject_id,
                    voter_id=voter_id,
                )
                raise DuplicateVoterError(
                    subject_type.value, subject_id, voter_id, existing.id
                )

            vote = Vote(
                id=VoteId(uuid4()),
                subject_type=subject_type,
                subject_id=subject_id,
                voter_id=voter_id,
                decision=cast,
                comment=normalized_comment,
                file_name=file_name,
                file_path=file_path,
                created_at=datetime.now(timezone.utc),
            )

            try:
                await self.vote_repository.append(vote)
            except DuplicateVoterError:
                # Lost a race against a concurrent submission by the same voter
                logfire.warn(
                    "Duplicate vote rejected by ledger",
                    subject_type=subject_type.value,
                    subject_id=subject_id,
                    voter_id=voter_id,
                )
                raise

            await self.transaction_manager.commit()
            logfire.info(
                "Vote recorded",
                vote_id=str(vote.id),
                decision=cast.value,
                subject_type=subject_type.value,
                subject_id=subject_id,
            )

            await self.invalidation.vote_recorded(subject_type, subject_id)

            votes = await self.vote_repository.list_by_subject(subject_type, subject_id)
            return aggregate_decision(votes)

    async def get_aggregate_decision(
        self, subject_type: SubjectType, subject_id: SubjectId
    ) -> AggregateDecision:
        """Compute the overall decision on a subject.

        Args:
            subject_type: Type of subject
            subject_id: ID of the subject

        Returns:
            Aggregate decision

        Raises:
            NotFoundError: If the subject does not exist
        """
        votes = await self.subject_resolver.resolve_votes(subject_type, subject_id)
        return aggregate_decision(votes)

    async def list_votes(
        self, subject_type: SubjectType, subject_id: SubjectId
    ) -> list[Vote]:
        """List a subject's votes, oldest first.

        Raises:
            NotFoundError: If the subject does not exist
        """
        return await self.subject_resolver.resolve_votes(subject_type, subject_id)

    async def list_document_groups(
        self, subject_type: SubjectType, subject_id: SubjectId
    ) -> list[DocumentVoteGroup]:
        """List the votes on each document uploaded for a subject.

        Raises:
            NotFoundError: If the subject does not exist
        """
        return await self.subject_resolver.resolve_document_groups(
            subject_type, subject_id
        )
