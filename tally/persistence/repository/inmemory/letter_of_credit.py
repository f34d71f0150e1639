"""In-memory letter of credit repository for testing."""

from datetime import datetime, timezone
from decimal import Decimal
from itertools import count
from typing import Optional

from tally.domain.model.letter_of_credit import LetterOfCredit, VesselLetterOfCredit
from tally.domain.repository.letter_of_credit import LetterOfCreditRepository
from tally.domain.value import LetterOfCreditId, VesselId, VesselLetterOfCreditId


class InMemoryLetterOfCreditRepository(LetterOfCreditRepository):
    """In-memory implementation of LetterOfCreditRepository for testing.

    Relation ids are assigned sequentially, like the serial column.
    """

    def __init__(self) -> None:
        self._lcs: dict[LetterOfCreditId, LetterOfCredit] = {}
        self._relations: dict[VesselLetterOfCreditId, VesselLetterOfCredit] = {}
        self._relation_ids = count(1)

    async def find_by_id(self, lc_id: LetterOfCreditId) -> Optional[LetterOfCredit]:
        return self._lcs.get(lc_id)

    async def save(self, lc: LetterOfCredit) -> LetterOfCredit:
        self._lcs[lc.id] = lc
        return lc

    async def find_relations(
        self, lc_id: LetterOfCreditId
    ) -> list[VesselLetterOfCredit]:
        return [r for r in self._relations.values() if r.lc_id == lc_id]

    async def find_relation_by_id(
        self, relation_id: VesselLetterOfCreditId
    ) -> Optional[VesselLetterOfCredit]:
        return self._relations.get(relation_id)

    async def add_relation(
        self,
        lc_id: LetterOfCreditId,
        vessel_id: VesselId,
        quantity: Decimal | None,
        notes: str | None = None,
    ) -> VesselLetterOfCredit:
        relation = VesselLetterOfCredit(
            id=VesselLetterOfCreditId(next(self._relation_ids)),
            vessel_id=vessel_id,
            lc_id=lc_id,
            quantity=quantity,
            notes=notes,
            created_at=datetime.now(timezone.utc),
        )
        self._relations[relation.id] = relation
        return relation

    async def delete_relation(self, relation_id: VesselLetterOfCreditId) -> bool:
        return self._relations.pop(relation_id, None) is not None
