"""Update vessel quantity use case."""

from decimal import Decimal

from pydantic import BaseModel

from tally.application.usecase.base import BaseUseCase
from tally.domain.service import AllocationService
from tally.domain.value import AllocatableEntityType, AllocationSummary, VesselId


class UpdateVesselQuantityRequest(BaseModel):
    """Update vessel quantity request."""

    vessel_id: int
    quantity: Decimal | None


class UpdateVesselQuantityResponse(BaseModel):
    """Update vessel quantity response.

    contract_summary is None for vessels not yet nominated on a contract.
    """

    vessel_id: int
    contract_id: int | None
    quantity: Decimal | None
    contract_summary: AllocationSummary | None


class UpdateVesselQuantityUseCase(BaseUseCase):
    """Use case for changing the quantity a vessel carries."""

    def __init__(self, allocation_service: AllocationService) -> None:
        """Initialize update vessel quantity use case.

        Args:
            allocation_service: Allocation domain service
        """
        self.allocation_service = allocation_service

    async def execute(
        self, request: UpdateVesselQuantityRequest
    ) -> UpdateVesselQuantityResponse:
        """Execute update vessel quantity flow.

        Args:
            request: Update vessel quantity request

        Returns:
            The vessel's new quantity and its contract's summary

        Raises:
            ValidationError: If the quantity is negative
            NotFoundError: If the vessel does not exist
        """
        vessel = await self.allocation_service.update_vessel_quantity(
            VesselId(request.vessel_id), request.quantity
        )

        contract_summary = None
        if vessel.contract_id is not None:
            contract_summary = await self.allocation_service.get_allocation_summary(
                AllocatableEntityType.CONTRACT, vessel.contract_id
            )

        return UpdateVesselQuantityResponse(
            vessel_id=vessel.id,
            contract_id=vessel.contract_id,
            quantity=vessel.quantity,
            contract_summary=contract_summary,
        )
