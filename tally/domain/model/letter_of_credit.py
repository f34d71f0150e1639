"""Letter of credit entity and its vessel relations."""

from datetime import datetime
from decimal import Decimal

from tally.domain.model.common import DomainModel
from tally.domain.value import LetterOfCreditId, VesselId, VesselLetterOfCreditId


class LetterOfCredit(DomainModel):
    """Letter of credit entity.

    A letter of credit is allocated against vessels through
    VesselLetterOfCredit rows, since one vessel may be financed by several.
    """

    id: LetterOfCreditId
    lc_number: str | None = None
    currency: str | None = None
    quantity: Decimal | None = None
    status: str = "active"
    created_at: datetime | None = None


class VesselLetterOfCredit(DomainModel):
    """Join row between a vessel and a letter of credit.

    The quantity here is the part of the vessel's cargo financed by this
    letter of credit. It overrides the vessel's own quantity when the
    letter of credit's allocation is computed.
    """

    id: VesselLetterOfCreditId
    vessel_id: VesselId
    lc_id: LetterOfCreditId
    quantity: Decimal | None = None
    notes: str | None = None
    created_at: datetime | None = None
