"""PostgreSQL implementation of Vessel repository."""

from decimal import Decimal
from typing import List, Optional

import logfire
from sqlalchemy import select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from tally.domain.model import Vessel
from tally.domain.repository import VesselRepository
from tally.domain.value import ContractId, VesselId
from tally.persistence.mappers import row_to_vessel, vessel_to_dict
from tally.persistence.tables import vessels_table


class PostgresVesselRepository(VesselRepository):
    """PostgreSQL implementation of VesselRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, vessel_id: VesselId) -> Optional[Vessel]:
        """Find a vessel by ID."""
        stmt = select(vessels_table).where(vessels_table.c.id == vessel_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vessel(row._asdict()) if row else None

    async def find_by_contract(self, contract_id: ContractId) -> List[Vessel]:
        """Find all vessels nominated against a contract."""
        stmt = (
            select(vessels_table)
            .where(vessels_table.c.contract_id == contract_id)
            .order_by(vessels_table.c.created_at.asc(), vessels_table.c.id.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_vessel(row._asdict()) for row in result.fetchall()]

    async def save(self, vessel: Vessel) -> Vessel:
        """Insert a vessel, or update it if the id already exists."""
        values = vessel_to_dict(vessel)
        stmt = (
            insert(vessels_table)
            .values(**values)
            .on_conflict_do_update(index_elements=["id"], set_=values)
            .returning(vessels_table)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return row_to_vessel(result.one()._asdict())

    async def update_quantity(
        self, vessel_id: VesselId, quantity: Decimal | None
    ) -> Optional[Vessel]:
        """Update a vessel's quantity in place."""
        with logfire.span(
            "vessel_repository.update_quantity", vessel_id=vessel_id
        ):
            stmt = (
                update(vessels_table)
                .where(vessels_table.c.id == vessel_id)
                .values(quantity=quantity)
                .returning(vessels_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if row is None:
                logfire.warn("Vessel not found", vessel_id=vessel_id)
                return None

            await self.session.flush()
            return row_to_vessel(row._asdict())
