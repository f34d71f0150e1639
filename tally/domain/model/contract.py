"""Contract entity."""

from datetime import datetime
from decimal import Decimal

from tally.domain.model.common import DomainModel
from tally.domain.value import ContractId, RequestId


class Contract(DomainModel):
    """Contract entity.

    Contracts are voting subjects and allocatable entities: their declared
    quantity is consumed by the vessels nominated against them.
    """

    id: ContractId
    request_id: RequestId | None = None
    supplier_name: str | None = None
    cargo_type: str | None = None
    quantity: Decimal | None = None
    status: str = "draft"
    created_at: datetime | None = None
