"""Release vessel allocation use case."""

from pydantic import BaseModel

from tally.application.usecase.base import BaseUseCase
from tally.domain.service import AllocationService
from tally.domain.value import (
    AllocatableEntityType,
    AllocationSummary,
    VesselLetterOfCreditId,
)


class ReleaseVesselAllocationRequest(BaseModel):
    """Release vessel allocation request."""

    relation_id: int


class ReleaseVesselAllocationResponse(BaseModel):
    """Release vessel allocation response."""

    relation_id: int
    lc_id: int
    vessel_id: int
    summary: AllocationSummary


class ReleaseVesselAllocationUseCase(BaseUseCase):
    """Use case for removing a vessel from a letter of credit."""

    def __init__(self, allocation_service: AllocationService) -> None:
        self.allocation_service = allocation_service

    async def execute(
        self, request: ReleaseVesselAllocationRequest
    ) -> ReleaseVesselAllocationResponse:
        """Execute release vessel allocation flow.

        Raises:
            NotFoundError: If the relation does not exist
        """
        relation = await self.allocation_service.release_vessel_allocation(
            VesselLetterOfCreditId(request.relation_id)
        )
        summary = await self.allocation_service.get_allocation_summary(
            AllocatableEntityType.LETTER_OF_CREDIT, relation.lc_id
        )

        return ReleaseVesselAllocationResponse(
            relation_id=relation.id,
            lc_id=relation.lc_id,
            vessel_id=relation.vessel_id,
            summary=summary,
        )
