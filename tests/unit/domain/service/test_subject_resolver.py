"""Unit tests for SubjectResolver and document grouping."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from tally.domain.error import NotFoundError
from tally.domain.repository import (
    ContractRepository,
    DocumentRepository,
    LetterOfCreditRepository,
    VesselRepository,
    VoteRepository,
)
from tally.domain.service import SubjectResolver, group_by_subject_document
from tally.domain.value import (
    AggregateStatus,
    AllocatableEntityType,
    LetterOfCreditId,
    SubjectId,
    SubjectType,
    VesselId,
    VoteDecision,
)
from tests.conftest import (
    make_contract,
    make_document,
    make_letter_of_credit,
    make_vessel,
    make_vote,
)
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestEnsureSubject:
    """Tests for ensure_subject."""

    @pytest.mark.asyncio
    async def test_existing_contract(self, unit_env):
        resolver = await unit_env.get(SubjectResolver)
        contract_repo = await unit_env.get(ContractRepository)
        await contract_repo.save(make_contract(3))

        await resolver.ensure_subject(SubjectType.CONTRACT, SubjectId(3))

    @pytest.mark.asyncio
    @pytest.mark.parametrize("subject_type", list(SubjectType))
    async def test_missing_subject_raises(self, unit_env, subject_type):
        resolver = await unit_env.get(SubjectResolver)

        with pytest.raises(NotFoundError, match=subject_type.value):
            await resolver.ensure_subject(subject_type, SubjectId(99))


class TestResolveAllocations:
    """Tests for resolve_allocations."""

    @pytest.mark.asyncio
    async def test_contract_uses_vessel_quantities(self, unit_env):
        resolver = await unit_env.get(SubjectResolver)
        contract_repo = await unit_env.get(ContractRepository)
        vessel_repo = await unit_env.get(VesselRepository)
        await contract_repo.save(make_contract(1))
        await vessel_repo.save(make_vessel(1, "300", contract_id=1))
        await vessel_repo.save(make_vessel(2, "250", contract_id=1))
        await vessel_repo.save(make_vessel(3, "999", contract_id=2))

        contract, allocations = await resolver.resolve_allocations(
            AllocatableEntityType.CONTRACT, 1
        )

        assert contract.id == 1
        assert sorted(a.quantity for a in allocations) == [
            Decimal("250"),
            Decimal("300"),
        ]

    @pytest.mark.asyncio
    async def test_letter_of_credit_uses_relation_quantity(self, unit_env):
        """A vessel split across letters of credit counts only its share."""
        resolver = await unit_env.get(SubjectResolver)
        lc_repo = await unit_env.get(LetterOfCreditRepository)
        vessel_repo = await unit_env.get(VesselRepository)
        await lc_repo.save(make_letter_of_credit(1))
        await vessel_repo.save(make_vessel(1, "500"))
        relation = await lc_repo.add_relation(
            LetterOfCreditId(1), VesselId(1), Decimal("200")
        )

        lc, [allocation] = await resolver.resolve_allocations(
            AllocatableEntityType.LETTER_OF_CREDIT, 1
        )

        assert lc.id == 1
        assert allocation.quantity == Decimal("200")
        assert allocation.relation_id == relation.id

    @pytest.mark.asyncio
    async def test_missing_entity_raises(self, unit_env):
        resolver = await unit_env.get(SubjectResolver)

        with pytest.raises(NotFoundError):
            await resolver.resolve_allocations(AllocatableEntityType.LETTER_OF_CREDIT, 4)


class TestResolveDocumentGroups:
    """Tests for resolve_document_groups."""

    @pytest.mark.asyncio
    async def test_contract_lists_each_uploaded_document(self, unit_env):
        resolver = await unit_env.get(SubjectResolver)
        contract_repo = await unit_env.get(ContractRepository)
        document_repo = await unit_env.get(DocumentRepository)
        vote_repo = await unit_env.get(VoteRepository)
        start = datetime(2026, 3, 1, tzinfo=timezone.utc)
        await contract_repo.save(make_contract(1))
        await document_repo.save(make_document(7, "invoice.pdf", created_at=start))
        await document_repo.save(
            make_document(4, "bl.pdf", created_at=start - timedelta(days=1))
        )
        await document_repo.save(make_document(9, "other.pdf", entity_id=2))
        await vote_repo.append(
            make_vote(
                VoteDecision.APPROVE, subject_type=SubjectType.DOCUMENT, subject_id=7
            )
        )
        # Opinion on the contract itself is not a document vote
        await vote_repo.append(make_vote(VoteDecision.APPROVE))

        groups = await resolver.resolve_document_groups(
            SubjectType.CONTRACT, SubjectId(1)
        )

        assert [g.document_id for g in groups] == [4, 7]
        assert groups[0].votes == []
        assert groups[0].decision.status == AggregateStatus.NO_VOTES
        assert groups[1].file_path == "uploads/1/invoice.pdf"
        assert groups[1].decision.status == AggregateStatus.APPROVED

    @pytest.mark.asyncio
    async def test_document_lists_itself(self, unit_env):
        resolver = await unit_env.get(SubjectResolver)
        document_repo = await unit_env.get(DocumentRepository)
        await document_repo.save(make_document(3, "certificate.pdf"))

        [group] = await resolver.resolve_document_groups(
            SubjectType.DOCUMENT, SubjectId(3)
        )

        assert group.document_id == 3
        assert group.file_name == "certificate.pdf"
        assert group.uploaded_at is not None

    @pytest.mark.asyncio
    async def test_missing_subject_raises(self, unit_env):
        resolver = await unit_env.get(SubjectResolver)

        with pytest.raises(NotFoundError):
            await resolver.resolve_document_groups(SubjectType.REQUEST, SubjectId(5))


class TestGroupBySubjectDocument:
    """Tests for group_by_subject_document."""

    def test_votes_grouped_per_document_in_given_order(self):
        start = datetime(2026, 3, 1, tzinfo=timezone.utc)
        bl = make_document(1, "bl.pdf", created_at=start)
        invoice = make_document(2, "invoice.pdf", created_at=start)
        votes = [
            make_vote(
                VoteDecision.PENDING,
                voter_id="uploader",
                subject_type=SubjectType.DOCUMENT,
                subject_id=2,
            ),
            make_vote(
                VoteDecision.APPROVE,
                voter_id="a",
                subject_type=SubjectType.DOCUMENT,
                subject_id=1,
            ),
            make_vote(
                VoteDecision.REJECT,
                voter_id="a",
                subject_type=SubjectType.DOCUMENT,
                subject_id=2,
            ),
        ]

        groups = group_by_subject_document([bl, invoice], votes)

        assert [g.file_name for g in groups] == ["bl.pdf", "invoice.pdf"]
        assert groups[0].uploaded_at == start
        assert groups[0].decision.status == AggregateStatus.APPROVED
        assert [v.voter_id for v in groups[1].votes] == ["uploader", "a"]
        assert groups[1].decision.status == AggregateStatus.REJECTED

    def test_same_name_different_path_are_distinct(self):
        documents = [
            make_document(1, "x.pdf", entity_id=1),
            make_document(2, "x.pdf", entity_id=2),
        ]

        groups = group_by_subject_document(documents, [])

        assert [g.file_path for g in groups] == ["uploads/1/x.pdf", "uploads/2/x.pdf"]

    def test_votes_on_other_subjects_are_ignored(self):
        """A contract vote with a stray reference never forms its own group."""
        stray = make_vote(
            VoteDecision.APPROVE, file_name="bl.pdf", file_path="uploads/1/bl.pdf"
        )

        [group] = group_by_subject_document([make_document(1, "bl.pdf")], [stray])

        assert group.votes == []

    def test_no_documents_no_groups(self):
        assert group_by_subject_document([], [make_vote(VoteDecision.APPROVE)]) == []
