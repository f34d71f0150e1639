"""In-memory document repository for testing."""

from datetime import datetime, timezone
from typing import Optional

from tally.domain.model.document import Document
from tally.domain.repository.document import DocumentRepository
from tally.domain.value import DocumentId


class InMemoryDocumentRepository(DocumentRepository):
    """In-memory implementation of DocumentRepository for testing.

    Stamps created_at on save when unset, like the column default.
    """

    def __init__(self) -> None:
        self._documents: dict[DocumentId, Document] = {}

    async def find_by_id(self, document_id: DocumentId) -> Optional[Document]:
        return self._documents.get(document_id)

    async def find_by_entity(self, entity_type: str, entity_id: int) -> list[Document]:
        documents = [
            d
            for d in self._documents.values()
            if d.entity_type == entity_type and d.entity_id == entity_id
        ]
        return sorted(documents, key=lambda d: (d.created_at, d.id))

    async def save(self, document: Document) -> Document:
        if document.created_at is None:
            document = document.model_copy(
                update={"created_at": datetime.now(timezone.utc)}
            )
        self._documents[document.id] = document
        return document
