"""List document vote groups use case."""

from datetime import datetime

from pydantic import BaseModel

from tally.application.usecase.base import BaseUseCase
from tally.domain.service import VoteService
from tally.domain.value import AggregateDecision, DocumentId, SubjectId, SubjectType

from .list_votes import VoteInfo


class ListDocumentGroupsRequest(BaseModel):
    """List document groups request."""

    subject_type: SubjectType
    subject_id: int


class DocumentGroupInfo(BaseModel):
    """Votes on one uploaded document."""

    document_id: DocumentId
    file_name: str
    file_path: str
    uploaded_at: datetime | None
    decision: AggregateDecision
    votes: list[VoteInfo]


class ListDocumentGroupsResponse(BaseModel):
    """List document groups response."""

    subject_type: SubjectType
    subject_id: int
    groups: list[DocumentGroupInfo]


class ListDocumentGroupsUseCase(BaseUseCase):
    """Use case for the per-document approval view of a subject."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(
        self, request: ListDocumentGroupsRequest
    ) -> ListDocumentGroupsResponse:
        """Execute list document groups flow.

        Raises:
            NotFoundError: If the subject does not exist
        """
        groups = await self.vote_service.list_document_groups(
            request.subject_type, SubjectId(request.subject_id)
        )
        return ListDocumentGroupsResponse(
            subject_type=request.subject_type,
            subject_id=request.subject_id,
            groups=[
                DocumentGroupInfo(
                    document_id=group.document_id,
                    file_name=group.file_name,
                    file_path=group.file_path,
                    uploaded_at=group.uploaded_at,
                    decision=group.decision,
                    votes=[VoteInfo.from_vote(vote) for vote in group.votes],
                )
                for group in groups
            ],
        )
