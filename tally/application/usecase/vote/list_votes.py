"""List votes use case."""

from datetime import datetime

from pydantic import BaseModel

from tally.application.usecase.base import BaseUseCase
from tally.domain.model import Vote
from tally.domain.service import VoteService
from tally.domain.value import SubjectId, SubjectType, VoteDecision


class ListVotesRequest(BaseModel):
    """List votes request."""

    subject_type: SubjectType
    subject_id: int


class VoteInfo(BaseModel):
    """Vote information for response."""

    vote_id: str
    voter_id: str
    decision: VoteDecision
    comment: str | None
    file_name: str | None
    file_path: str | None
    created_at: datetime

    @classmethod
    def from_vote(cls, vote: Vote) -> "VoteInfo":
        return cls(
            vote_id=str(vote.id),
            voter_id=vote.voter_id,
            decision=vote.decision,
            comment=vote.comment,
            file_name=vote.file_name,
            file_path=vote.file_path,
            created_at=vote.created_at,
        )


class ListVotesResponse(BaseModel):
    """List votes response."""

    subject_type: SubjectType
    subject_id: int
    votes: list[VoteInfo]


class ListVotesUseCase(BaseUseCase):
    """Use case for listing who voted what on a subject."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize list votes use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: ListVotesRequest) -> ListVotesResponse:
        """Execute list votes flow.

        Args:
            request: List votes request

        Returns:
            Votes in creation order

        Raises:
            NotFoundError: If the subject does not exist
        """
        votes = await self.vote_service.list_votes(
            request.subject_type, SubjectId(request.subject_id)
        )
        return ListVotesResponse(
            subject_type=request.subject_type,
            subject_id=request.subject_id,
            votes=[VoteInfo.from_vote(vote) for vote in votes],
        )
