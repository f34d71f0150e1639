"""In-memory vessel repository for testing."""

from decimal import Decimal
from typing import Optional

from tally.domain.model.vessel import Vessel
from tally.domain.repository.vessel import VesselRepository
from tally.domain.value import ContractId, VesselId


class InMemoryVesselRepository(VesselRepository):
    """In-memory implementation of VesselRepository for testing."""

    def __init__(self) -> None:
        self._vessels: dict[VesselId, Vessel] = {}

    async def find_by_id(self, vessel_id: VesselId) -> Optional[Vessel]:
        """Find a vessel by ID."""
        return self._vessels.get(vessel_id)

    async def find_by_contract(self, contract_id: ContractId) -> list[Vessel]:
        """Find all vessels nominated against a contract."""
        return [v for v in self._vessels.values() if v.contract_id == contract_id]

    async def save(self, vessel: Vessel) -> Vessel:
        """Save a vessel."""
        self._vessels[vessel.id] = vessel
        return vessel

    async def update_quantity(
        self, vessel_id: VesselId, quantity: Decimal | None
    ) -> Optional[Vessel]:
        """Replace a vessel with a copy carrying the new quantity."""
        vessel = self._vessels.get(vessel_id)
        if vessel is None:
            return None
        updated = vessel.model_copy(update={"quantity": quantity})
        self._vessels[vessel_id] = updated
        return updated
