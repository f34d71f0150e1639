"""Uploaded document entity."""

from datetime import datetime

from tally.domain.model.common import DomainModel
from tally.domain.value import DocumentId


class Document(DomainModel):
    """Reference to an uploaded document awaiting approval.

    Only the reference matters to the core; file storage lives elsewhere.
    """

    id: DocumentId
    entity_type: str  # What the document was uploaded for, e.g. "contract"
    entity_id: int
    file_name: str
    file_path: str
    uploaded_by: str
    created_at: datetime | None = None
