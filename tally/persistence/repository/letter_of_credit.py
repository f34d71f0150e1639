"""PostgreSQL implementation of LetterOfCredit repository."""

from decimal import Decimal
from typing import List, Optional

from sqlalchemy import delete, insert, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from tally.domain.model import LetterOfCredit, VesselLetterOfCredit
from tally.domain.repository import LetterOfCreditRepository
from tally.domain.value import LetterOfCreditId, VesselId, VesselLetterOfCreditId
from tally.persistence.mappers import (
    letter_of_credit_to_dict,
    row_to_letter_of_credit,
    row_to_vessel_letter_of_credit,
)
from tally.persistence.tables import (
    letters_of_credit_table,
    vessel_letters_of_credit_table,
)


class PostgresLetterOfCreditRepository(LetterOfCreditRepository):
    """PostgreSQL implementation of LetterOfCreditRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, lc_id: LetterOfCreditId) -> Optional[LetterOfCredit]:
        """Find a letter of credit by ID."""
        stmt = select(letters_of_credit_table).where(
            letters_of_credit_table.c.id == lc_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_letter_of_credit(row._asdict()) if row else None

    async def save(self, lc: LetterOfCredit) -> LetterOfCredit:
        """Insert a letter of credit, or update it if the id already exists."""
        values = letter_of_credit_to_dict(lc)
        stmt = (
            pg_insert(letters_of_credit_table)
            .values(**values)
            .on_conflict_do_update(index_elements=["id"], set_=values)
            .returning(letters_of_credit_table)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return row_to_letter_of_credit(result.one()._asdict())

    async def find_relations(
        self, lc_id: LetterOfCreditId
    ) -> List[VesselLetterOfCredit]:
        """Find all vessel relations of a letter of credit, oldest first."""
        relations = vessel_letters_of_credit_table
        stmt = (
            select(relations)
            .where(relations.c.lc_id == lc_id)
            .order_by(relations.c.created_at.asc(), relations.c.id.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_vessel_letter_of_credit(row._asdict()) for row in result]

    async def find_relation_by_id(
        self, relation_id: VesselLetterOfCreditId
    ) -> Optional[VesselLetterOfCredit]:
        """Find a single vessel relation."""
        stmt = select(vessel_letters_of_credit_table).where(
            vessel_letters_of_credit_table.c.id == relation_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vessel_letter_of_credit(row._asdict()) if row else None

    async def add_relation(
        self,
        lc_id: LetterOfCreditId,
        vessel_id: VesselId,
        quantity: Decimal | None,
        notes: str | None = None,
    ) -> VesselLetterOfCredit:
        """Insert a vessel relation and return it with its serial id."""
        stmt = (
            insert(vessel_letters_of_credit_table)
            .values(lc_id=lc_id, vessel_id=vessel_id, quantity=quantity, notes=notes)
            .returning(vessel_letters_of_credit_table)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return row_to_vessel_letter_of_credit(result.one()._asdict())

    async def delete_relation(self, relation_id: VesselLetterOfCreditId) -> bool:
        """Delete a vessel relation."""
        stmt = delete(vessel_letters_of_credit_table).where(
            vessel_letters_of_credit_table.c.id == relation_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
