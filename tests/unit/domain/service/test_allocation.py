"""Unit tests for allocation reconciliation."""

from decimal import Decimal

from tally.domain.service import reconcile
from tally.domain.value import Allocation, AllocationProgress, VesselId


def _allocations(*quantities: str | None) -> list[Allocation]:
    return [
        Allocation(
            vessel_id=VesselId(i),
            quantity=Decimal(q) if q is not None else None,
        )
        for i, q in enumerate(quantities, start=1)
    ]


class TestReconcile:
    """Tests for reconcile."""

    def test_partial_allocation(self):
        summary = reconcile(Decimal("1000"), _allocations("300", "250"))

        assert summary.allocated == Decimal("550")
        assert summary.remaining == Decimal("450")
        assert summary.utilization_rate == Decimal("55")
        assert summary.progress == AllocationProgress.IN_PROGRESS
        assert summary.over_allocated is False

    def test_over_allocation_reports_negative_remaining(self):
        """Over-allocation is reported, never clamped."""
        summary = reconcile(Decimal("1000"), _allocations("600", "600"))

        assert summary.allocated == Decimal("1200")
        assert summary.remaining == Decimal("-200")
        assert summary.over_allocated is True
        assert summary.progress == AllocationProgress.COMPLETED

    def test_missing_quantities_count_as_zero(self):
        summary = reconcile(Decimal("1000"), _allocations(None, "400", None))

        assert summary.allocated == Decimal("400")
        assert summary.remaining == Decimal("600")

    def test_missing_capacity_counts_as_zero(self):
        summary = reconcile(None, _allocations("100"))

        assert summary.capacity == Decimal("0")
        assert summary.remaining == Decimal("-100")
        assert summary.utilization_rate == Decimal("0")

    def test_no_allocations_started(self):
        summary = reconcile(Decimal("750"), [])

        assert summary.allocated == Decimal("0")
        assert summary.remaining == Decimal("750")
        assert summary.progress == AllocationProgress.STARTED

    def test_exact_allocation_completes(self):
        summary = reconcile(Decimal("500.5"), _allocations("200.25", "300.25"))

        assert summary.remaining == Decimal("0")
        assert summary.utilization_rate == Decimal("100")
        assert summary.progress == AllocationProgress.COMPLETED
        assert summary.over_allocated is False
