"""Vessel entity."""

from datetime import datetime
from decimal import Decimal

from tally.domain.model.common import DomainModel
from tally.domain.value import ContractId, VesselId


class Vessel(DomainModel):
    """Vessel nominated to carry part of a contract's quantity."""

    id: VesselId
    contract_id: ContractId | None = None
    vessel_name: str | None = None
    quantity: Decimal | None = None
    status: str = "nominated"
    created_at: datetime | None = None
