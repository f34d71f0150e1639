"""Derived read models: vote tallies and allocation summaries."""

from decimal import Decimal

from pydantic import computed_field

from tally.domain.value.common import ValueObject
from tally.domain.value.identifiers import VesselId
from tally.domain.value.types import AggregateStatus, AllocationProgress


class AggregateDecision(ValueObject):
    """Overall decision for a subject, computed from its vote slice."""

    status: AggregateStatus
    approvals: int = 0
    rejections: int = 0
    pending: int = 0

    @computed_field
    @property
    def total(self) -> int:
        """Number of votes counted, placeholders included."""
        return self.approvals + self.rejections + self.pending


class Allocation(ValueObject):
    """One vessel's share of an allocatable entity.

    For letters of credit the quantity comes from the LC-vessel relation,
    not from the vessel itself.
    """

    vessel_id: VesselId
    quantity: Decimal | None = None
    relation_id: int | None = None  # Set for letter-of-credit allocations


class AllocationSummary(ValueObject):
    """Allocated and remaining quantity for an allocatable entity.

    Remaining may be negative: over-allocation is reported, never blocked.
    """

    capacity: Decimal
    allocated: Decimal
    remaining: Decimal
    utilization_rate: Decimal  # Percent of capacity, 0 when capacity is 0
    progress: AllocationProgress

    @computed_field
    @property
    def over_allocated(self) -> bool:
        """Whether allocations exceed the declared capacity."""
        return self.remaining < 0
