"""Allocation routes."""

from decimal import Decimal

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel

from tally.application.usecase.allocation import (
    AllocateVesselRequest,
    AllocateVesselResponse,
    AllocateVesselUseCase,
    GetAllocationSummaryRequest,
    GetAllocationSummaryResponse,
    GetAllocationSummaryUseCase,
    ReleaseVesselAllocationRequest,
    ReleaseVesselAllocationResponse,
    ReleaseVesselAllocationUseCase,
    UpdateVesselQuantityRequest,
    UpdateVesselQuantityResponse,
    UpdateVesselQuantityUseCase,
)
from tally.domain.error import DomainError
from tally.domain.value import AllocatableEntityType
from tally.interface.error import http_error

router = APIRouter(tags=["allocations"], route_class=DishkaRoute)


class AllocateVesselBody(BaseModel):
    """Body of a letter of credit allocation."""

    vessel_id: int
    quantity: Decimal | None = None
    notes: str | None = None


class UpdateVesselQuantityBody(BaseModel):
    """Body of a vessel quantity change."""

    quantity: Decimal | None


@router.get(
    "/allocations/{entity_type}/{entity_id}",
    response_model=GetAllocationSummaryResponse,
)
async def get_allocation_summary(
    entity_type: AllocatableEntityType,
    entity_id: int,
    use_case: FromDishka[GetAllocationSummaryUseCase],
) -> GetAllocationSummaryResponse:
    """Get allocated and remaining quantity of a contract or letter of credit.

    Over-allocated entities report a negative remaining quantity.
    """
    try:
        return await use_case.execute(
            GetAllocationSummaryRequest(entity_type=entity_type, entity_id=entity_id)
        )
    except DomainError as e:
        raise http_error(e)


@router.post(
    "/allocations/letter_of_credit/{lc_id}/vessels",
    response_model=AllocateVesselResponse,
    status_code=status.HTTP_201_CREATED,
)
async def allocate_vessel(
    lc_id: int,
    body: AllocateVesselBody,
    use_case: FromDishka[AllocateVesselUseCase],
) -> AllocateVesselResponse:
    """Finance part of a vessel's cargo with a letter of credit."""
    try:
        return await use_case.execute(
            AllocateVesselRequest(
                lc_id=lc_id,
                vessel_id=body.vessel_id,
                quantity=body.quantity,
                notes=body.notes,
            )
        )
    except DomainError as e:
        raise http_error(e)


@router.delete(
    "/allocations/letter_of_credit/relations/{relation_id}",
    response_model=ReleaseVesselAllocationResponse,
)
async def release_vessel_allocation(
    relation_id: int,
    use_case: FromDishka[ReleaseVesselAllocationUseCase],
) -> ReleaseVesselAllocationResponse:
    """Remove a vessel from a letter of credit."""
    try:
        return await use_case.execute(
            ReleaseVesselAllocationRequest(relation_id=relation_id)
        )
    except DomainError as e:
        raise http_error(e)


@router.patch("/vessels/{vessel_id}/quantity", response_model=UpdateVesselQuantityResponse)
async def update_vessel_quantity(
    vessel_id: int,
    body: UpdateVesselQuantityBody,
    use_case: FromDishka[UpdateVesselQuantityUseCase],
) -> UpdateVesselQuantityResponse:
    """Change the quantity a vessel carries."""
    try:
        return await use_case.execute(
            UpdateVesselQuantityRequest(vessel_id=vessel_id, quantity=body.quantity)
        )
    except DomainError as e:
        raise http_error(e)
