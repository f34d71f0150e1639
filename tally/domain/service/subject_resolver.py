"""Subject resolution.

Maps a voting subject to its vote slice and an allocatable entity to the
vessel allocations that consume it.
"""

from typing import Iterable, Sequence

import logfire

from tally.domain.error import NotFoundError
from tally.domain.model import (
    Contract,
    Document,
    DocumentVoteGroup,
    LetterOfCredit,
    Request,
    Vote,
)
from tally.domain.repository import (
    ContractRepository,
    DocumentRepository,
    LetterOfCreditRepository,
    RequestRepository,
    VesselRepository,
    VoteRepository,
)
from tally.domain.value import (
    AllocatableEntityType,
    Allocation,
    ContractId,
    DocumentId,
    LetterOfCreditId,
    RequestId,
    SubjectId,
    SubjectType,
    VesselId,
)

from .base import Service
from .vote_policy import aggregate_decision


class SubjectResolver(Service):
    """Domain service resolving subjects and allocatable entities."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        contract_repository: ContractRepository,
        request_repository: RequestRepository,
        document_repository: DocumentRepository,
        letter_of_credit_repository: LetterOfCreditRepository,
        vessel_repository: VesselRepository,
    ) -> None:
        """Initialize subject resolver.

        Args:
            vote_repository: Vote ledger
            contract_repository: Contract repository
            request_repository: Request repository
            document_repository: Document repository
            letter_of_credit_repository: Letter of credit repository
            vessel_repository: Vessel repository
        """
        self.vote_repository = vote_repository
        self.contract_repository = contract_repository
        self.request_repository = request_repository
        self.document_repository = document_repository
        self.letter_of_credit_repository = letter_of_credit_repository
        self.vessel_repository = vessel_repository

    async def ensure_subject(
        self, subject_type: SubjectType, subject_id: SubjectId
    ) -> Contract | Request | Document:
        """Load a voting subject, checking that it exists.

        Args:
            subject_type: Type of subject
            subject_id: ID of the subject

        Returns:
            The contract, request or document

        Raises:
            NotFoundError: If the subject does not exist
        """
        if subject_type is SubjectType.CONTRACT:
            subject = await self.contract_repository.find_by_id(ContractId(subject_id))
        elif subject_type is SubjectType.REQUEST:
            subject = await self.request_repository.find_by_id(RequestId(subject_id))
        elif subject_type is SubjectType.DOCUMENT:
            subject = await self.document_repository.find_by_id(DocumentId(subject_id))
        else:
            raise ValueError(f"Unhandled subject type: {subject_type!r}")

        if subject is None:
            logfire.warn(
                "Subject not found",
                subject_type=subject_type.value,
                subject_id=subject_id,
            )
            raise NotFoundError(subject_type.value, str(subject_id))
        return subject

    async def resolve_votes(
        self, subject_type: SubjectType, subject_id: SubjectId
    ) -> list[Vote]:
        """Resolve the vote slice of a subject.

        Args:
            subject_type: Type of subject
            subject_id: ID of the subject

        Returns:
            Votes in creation order

        Raises:
            NotFoundError: If the subject does not exist
        """
        await self.ensure_subject(subject_type, subject_id)
        return await self.vote_repository.list_by_subject(subject_type, subject_id)

    async def resolve_document_groups(
        self, subject_type: SubjectType, subject_id: SubjectId
    ) -> list[DocumentVoteGroup]:
        """Resolve the per-document votes of a subject.

        Every document is its own voting subject. For a contract or request
        this covers each document uploaded for it; for a document, just
        that document.

        Args:
            subject_type: Type of subject
            subject_id: ID of the subject

        Returns:
            One group per document, oldest upload first

        Raises:
            NotFoundError: If the subject does not exist
        """
        subject = await self.ensure_subject(subject_type, subject_id)
        if isinstance(subject, Document):
            documents = [subject]
        else:
            documents = await self.document_repository.find_by_entity(
                subject_type.value, subject_id
            )

        votes: list[Vote] = []
        for document in documents:
            votes.extend(
                await self.vote_repository.list_by_subject(
                    SubjectType.DOCUMENT, SubjectId(document.id)
                )
            )
        return group_by_subject_document(documents, votes)

    async def resolve_allocations(
        self, entity_type: AllocatableEntityType, entity_id: int
    ) -> tuple[Contract | LetterOfCredit, list[Allocation]]:
        """Resolve an allocatable entity and the allocations against it.

        Contracts own their vessels directly (vessel.contract_id). Letters
        of credit reach vessels through relation rows, and each relation's
        own quantity is the allocation, since one vessel may be split
        across several letters of credit.

        Args:
            entity_type: Contract or letter of credit
            entity_id: ID of the entity

        Returns:
            The entity and its allocations

        Raises:
            NotFoundError: If the entity does not exist
        """
        if entity_type is AllocatableEntityType.CONTRACT:
            contract = await self.contract_repository.find_by_id(ContractId(entity_id))
            if contract is None:
                raise NotFoundError(entity_type.value, str(entity_id))
            vessels = await self.vessel_repository.find_by_contract(contract.id)
            return contract, [
                Allocation(vessel_id=vessel.id, quantity=vessel.quantity)
                for vessel in vessels
            ]

        if entity_type is AllocatableEntityType.LETTER_OF_CREDIT:
            lc = await self.letter_of_credit_repository.find_by_id(
                LetterOfCreditId(entity_id)
            )
            if lc is None:
                raise NotFoundError(entity_type.value, str(entity_id))
            relations = await self.letter_of_credit_repository.find_relations(lc.id)
            return lc, [
                Allocation(
                    vessel_id=VesselId(relation.vessel_id),
                    quantity=relation.quantity,
                    relation_id=relation.id,
                )
                for relation in relations
            ]

        raise ValueError(f"Unhandled allocatable entity type: {entity_type!r}")


def group_by_subject_document(
    documents: Sequence[Document], votes: Iterable[Vote]
) -> list[DocumentVoteGroup]:
    """Group document votes under the documents they were cast on.

    A vote belongs to a document when it was cast with the document as its
    subject. Votes on anything else are ignored. Documents nobody has voted
    on yet still get a group.

    Args:
        documents: Documents in display order
        votes: Votes in creation order

    Returns:
        One group per document, in the order given
    """
    grouped: dict[int, list[Vote]] = {document.id: [] for document in documents}
    for vote in votes:
        if vote.subject_type is SubjectType.DOCUMENT and vote.subject_id in grouped:
            grouped[vote.subject_id].append(vote)

    return [
        DocumentVoteGroup(
            document_id=document.id,
            file_name=document.file_name,
            file_path=document.file_path,
            uploaded_at=document.created_at,
            votes=grouped[document.id],
            decision=aggregate_decision(grouped[document.id]),
        )
        for document in documents
    ]
