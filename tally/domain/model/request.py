"""Contract request entity."""

from datetime import datetime
from decimal import Decimal

from tally.domain.model.common import DomainModel
from tally.domain.value import RequestId


class Request(DomainModel):
    """Contract request, voted on by managers before a contract is drafted."""

    id: RequestId
    title: str
    quantity: Decimal | None = None
    status: str = "pending"
    created_at: datetime | None = None
