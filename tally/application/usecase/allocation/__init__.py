"""Allocation use cases."""

from .allocate_vessel import (
    AllocateVesselRequest,
    AllocateVesselResponse,
    AllocateVesselUseCase,
)
from .get_allocation_summary import (
    GetAllocationSummaryRequest,
    GetAllocationSummaryResponse,
    GetAllocationSummaryUseCase,
)
from .release_vessel_allocation import (
    ReleaseVesselAllocationRequest,
    ReleaseVesselAllocationResponse,
    ReleaseVesselAllocationUseCase,
)
from .update_vessel_quantity import (
    UpdateVesselQuantityRequest,
    UpdateVesselQuantityResponse,
    UpdateVesselQuantityUseCase,
)

__all__ = [
    "AllocateVesselRequest",
    "AllocateVesselResponse",
    "AllocateVesselUseCase",
    "GetAllocationSummaryRequest",
    "GetAllocationSummaryResponse",
    "GetAllocationSummaryUseCase",
    "ReleaseVesselAllocationRequest",
    "ReleaseVesselAllocationResponse",
    "ReleaseVesselAllocationUseCase",
    "UpdateVesselQuantityRequest",
    "UpdateVesselQuantityResponse",
    "UpdateVesselQuantityUseCase",
]
