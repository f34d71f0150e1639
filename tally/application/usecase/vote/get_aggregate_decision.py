"""Get aggregate decision use case."""

from pydantic import BaseModel

from tally.application.usecase.base import BaseUseCase
from tally.domain.service import VoteService
from tally.domain.value import AggregateDecision, SubjectId, SubjectType


class GetAggregateDecisionRequest(BaseModel):
    """Get aggregate decision request."""

    subject_type: SubjectType
    subject_id: int


class GetAggregateDecisionResponse(BaseModel):
    """Get aggregate decision response."""

    subject_type: SubjectType
    subject_id: int
    decision: AggregateDecision


class GetAggregateDecisionUseCase(BaseUseCase):
    """Use case for reading a subject's overall approval state."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(
        self, request: GetAggregateDecisionRequest
    ) -> GetAggregateDecisionResponse:
        """Execute get aggregate decision flow.

        Raises:
            NotFoundError: If the subject does not exist
        """
        decision = await self.vote_service.get_aggregate_decision(
            request.subject_type, SubjectId(request.subject_id)
        )
        return GetAggregateDecisionResponse(
            subject_type=request.subject_type,
            subject_id=request.subject_id,
            decision=decision,
        )
