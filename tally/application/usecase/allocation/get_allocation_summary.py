"""Get allocation summary use case."""

from pydantic import BaseModel

from tally.application.usecase.base import BaseUseCase
from tally.domain.service import AllocationService
from tally.domain.value import AllocatableEntityType, AllocationSummary


class GetAllocationSummaryRequest(BaseModel):
    """Get allocation summary request."""

    entity_type: AllocatableEntityType
    entity_id: int


class GetAllocationSummaryResponse(BaseModel):
    """Get allocation summary response."""

    entity_type: AllocatableEntityType
    entity_id: int
    summary: AllocationSummary


class GetAllocationSummaryUseCase(BaseUseCase):
    """Use case for reconciling a contract or letter of credit."""

    def __init__(self, allocation_service: AllocationService) -> None:
        """Initialize get allocation summary use case.

        Args:
            allocation_service: Allocation domain service
        """
        self.allocation_service = allocation_service

    async def execute(
        self, request: GetAllocationSummaryRequest
    ) -> GetAllocationSummaryResponse:
        """Execute get allocation summary flow.

        Args:
            request: Entity to reconcile

        Returns:
            Allocated and remaining quantity

        Raises:
            NotFoundError: If the entity does not exist
        """
        summary = await self.allocation_service.get_allocation_summary(
            request.entity_type, request.entity_id
        )
        return GetAllocationSummaryResponse(
            entity_type=request.entity_type,
            entity_id=request.entity_id,
            summary=summary,
        )
