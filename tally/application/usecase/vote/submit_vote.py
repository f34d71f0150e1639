"""Submit vote use case."""

from pydantic import BaseModel

from tally.application.usecase.base import BaseUseCase
from tally.domain.service import VoteService
from tally.domain.value import AggregateDecision, SubjectId, SubjectType, VoterId


class SubmitVoteRequest(BaseModel):
    """Submit vote request."""

    subject_type: SubjectType
    subject_id: int
    voter_id: str  # From the authenticated identity, never from the body
    decision: str  # approve/reject, or one of the yes/no/accept aliases
    comment: str | None = None
    file_name: str | None = None
    file_path: str | None = None


class SubmitVoteResponse(BaseModel):
    """Submit vote response: the subject's decision after this vote."""

    subject_type: SubjectType
    subject_id: int
    decision: AggregateDecision


class SubmitVoteUseCase(BaseUseCase):
    """Use case for casting a vote on a contract, request or document."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize submit vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: SubmitVoteRequest) -> SubmitVoteResponse:
        """Execute submit vote flow.

        Args:
            request: Submit vote request

        Returns:
            Aggregate decision including the new vote

        Raises:
            ValidationError: If the decision or comment is invalid
            NotFoundError: If the subject does not exist
            DuplicateVoterError: If the voter already voted
        """
        decision = await self.vote_service.submit_vote(
            subject_type=request.subject_type,
            subject_id=SubjectId(request.subject_id),
            voter_id=VoterId(request.voter_id),
            decision=request.decision,
            comment=request.comment,
            file_name=request.file_name,
            file_path=request.file_path,
        )

        return SubmitVoteResponse(
            subject_type=request.subject_type,
            subject_id=request.subject_id,
            decision=decision,
        )
