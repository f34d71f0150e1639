"""Document repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from tally.domain.model.document import Document
from tally.domain.value import DocumentId


class DocumentRepository(ABC):
    """Repository for uploaded document references."""

    @abstractmethod
    async def find_by_id(self, document_id: DocumentId) -> Optional[Document]:
        """Find a document by ID."""
        pass

    @abstractmethod
    async def find_by_entity(self, entity_type: str, entity_id: int) -> List[Document]:
        """Find the documents uploaded for an entity, oldest first.

        Args:
            entity_type: What the documents were uploaded for, e.g. "contract"
            entity_id: ID of that entity

        Returns:
            Document references in upload order
        """
        pass

    @abstractmethod
    async def save(self, document: Document) -> Document:
        """Save a document reference (create or update)."""
        pass
