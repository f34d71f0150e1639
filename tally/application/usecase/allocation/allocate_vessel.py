"""Allocate vessel to letter of credit use case."""

from decimal import Decimal

from pydantic import BaseModel

from tally.application.usecase.base import BaseUseCase
from tally.domain.service import AllocationService
from tally.domain.value import (
    AllocatableEntityType,
    AllocationSummary,
    LetterOfCreditId,
    VesselId,
)


class AllocateVesselRequest(BaseModel):
    """Allocate vessel request."""

    lc_id: int
    vessel_id: int
    quantity: Decimal | None = None
    notes: str | None = None


class AllocateVesselResponse(BaseModel):
    """Allocate vessel response with the letter of credit's new summary."""

    relation_id: int
    lc_id: int
    vessel_id: int
    quantity: Decimal | None
    notes: str | None
    summary: AllocationSummary


class AllocateVesselUseCase(BaseUseCase):
    """Use case for financing a vessel with a letter of credit."""

    def __init__(self, allocation_service: AllocationService) -> None:
        """Initialize allocate vessel use case.

        Args:
            allocation_service: Allocation domain service
        """
        self.allocation_service = allocation_service

    async def execute(self, request: AllocateVesselRequest) -> AllocateVesselResponse:
        """Execute allocate vessel flow.

        Over-allocation is accepted; the returned summary reports it.

        Args:
            request: Allocate vessel request

        Returns:
            The created relation and the letter of credit's summary

        Raises:
            ValidationError: If the quantity is negative
            NotFoundError: If the letter of credit or vessel does not exist
        """
        relation = await self.allocation_service.allocate_vessel_to_letter_of_credit(
            lc_id=LetterOfCreditId(request.lc_id),
            vessel_id=VesselId(request.vessel_id),
            quantity=request.quantity,
            notes=request.notes,
        )
        summary = await self.allocation_service.get_allocation_summary(
            AllocatableEntityType.LETTER_OF_CREDIT, relation.lc_id
        )

        return AllocateVesselResponse(
            relation_id=relation.id,
            lc_id=relation.lc_id,
            vessel_id=relation.vessel_id,
            quantity=relation.quantity,
            notes=relation.notes,
            summary=summary,
        )
