"""PostgreSQL implementation of Request repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from tally.domain.model import Request
from tally.domain.repository import RequestRepository
from tally.domain.value import RequestId
from tally.persistence.mappers import request_to_dict, row_to_request
from tally.persistence.tables import requests_table


class PostgresRequestRepository(RequestRepository):
    """PostgreSQL implementation of RequestRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, request_id: RequestId) -> Optional[Request]:
        """Find a request by ID."""
        stmt = select(requests_table).where(requests_table.c.id == request_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_request(row._asdict()) if row else None

    async def save(self, request: Request) -> Request:
        """Insert a request, or update it if the id already exists."""
        values = request_to_dict(request)
        stmt = (
            insert(requests_table)
            .values(**values)
            .on_conflict_do_update(index_elements=["id"], set_=values)
            .returning(requests_table)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return row_to_request(result.one()._asdict())
