"""PostgreSQL implementation of Document repository."""

from typing import List, Optional

from sqlalchemy import and_, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from tally.domain.model import Document
from tally.domain.repository import DocumentRepository
from tally.domain.value import DocumentId
from tally.persistence.mappers import document_to_dict, row_to_document
from tally.persistence.tables import documents_table


class PostgresDocumentRepository(DocumentRepository):
    """PostgreSQL implementation of DocumentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, document_id: DocumentId) -> Optional[Document]:
        """Find a document reference by ID."""
        stmt = select(documents_table).where(documents_table.c.id == document_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_document(row._asdict()) if row else None

    async def find_by_entity(self, entity_type: str, entity_id: int) -> List[Document]:
        """Find the documents uploaded for an entity, oldest first."""
        stmt = (
            select(documents_table)
            .where(
                and_(
                    documents_table.c.entity_type == entity_type,
                    documents_table.c.entity_id == entity_id,
                )
            )
            .order_by(documents_table.c.created_at.asc(), documents_table.c.id.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_document(row._asdict()) for row in result.fetchall()]

    async def save(self, document: Document) -> Document:
        """Insert a document reference, or update it if the id already exists."""
        values = document_to_dict(document)
        stmt = (
            insert(documents_table)
            .values(**values)
            .on_conflict_do_update(index_elements=["id"], set_=values)
            .returning(documents_table)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return row_to_document(result.one()._asdict())
