"""PostgreSQL implementation of Contract repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from tally.domain.model import Contract
from tally.domain.repository import ContractRepository
from tally.domain.value import ContractId
from tally.persistence.mappers import contract_to_dict, row_to_contract
from tally.persistence.tables import contracts_table


class PostgresContractRepository(ContractRepository):
    """PostgreSQL implementation of ContractRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, contract_id: ContractId) -> Optional[Contract]:
        """Find a contract by ID."""
        stmt = select(contracts_table).where(contracts_table.c.id == contract_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_contract(row._asdict()) if row else None

    async def save(self, contract: Contract) -> Contract:
        """Insert a contract, or update it if the id already exists."""
        values = contract_to_dict(contract)
        stmt = (
            insert(contracts_table)
            .values(**values)
            .on_conflict_do_update(index_elements=["id"], set_=values)
            .returning(contracts_table)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return row_to_contract(result.one()._asdict())
