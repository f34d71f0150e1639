"""Allocation reconciliation.

Pure read-time aggregation over an entity's allocations. Safe to call on
every read; it holds no state and never blocks over-allocation.
"""

from decimal import Decimal
from typing import Iterable

from tally.domain.value import Allocation, AllocationProgress, AllocationSummary

_HUNDRED = Decimal(100)


def reconcile(
    capacity: Decimal | None, allocations: Iterable[Allocation]
) -> AllocationSummary:
    """Sum allocations against an entity's declared quantity.

    Missing quantities count as zero. Remaining is not clamped, so an
    over-allocated entity reports a negative remainder.

    Args:
        capacity: The entity's declared quantity
        allocations: Vessel allocations against the entity

    Returns:
        Allocated and remaining quantity with presentation helpers
    """
    total = capacity if capacity is not None else Decimal(0)
    allocated = sum(
        (a.quantity for a in allocations if a.quantity is not None), Decimal(0)
    )
    remaining = total - allocated

    if total > 0:
        utilization_rate = allocated / total * _HUNDRED
    else:
        utilization_rate = Decimal(0)

    if allocated == 0:
        progress = AllocationProgress.STARTED
    elif allocated < total:
        progress = AllocationProgress.IN_PROGRESS
    else:
        progress = AllocationProgress.COMPLETED

    return AllocationSummary(
        capacity=total,
        allocated=allocated,
        remaining=remaining,
        utilization_rate=utilization_rate,
        progress=progress,
    )
