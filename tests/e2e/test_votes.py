"""End-to-end tests for the vote endpoints."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from tally.domain.model import Document
from tally.domain.repository import (
    ContractRepository,
    DocumentRepository,
    RequestRepository,
    VoteRepository,
)
from tally.domain.value import DocumentId, SubjectType, VoteDecision
from tally.interface.api.app import create_app
from tests.conftest import make_contract, make_request, make_token, make_vote
from tests.di import build_test_container


async def _seed(container) -> None:
    contract_repo = await container.get(ContractRepository)
    request_repo = await container.get(RequestRepository)
    document_repo = await container.get(DocumentRepository)
    vote_repo = await container.get(VoteRepository)

    await contract_repo.save(make_contract(1))
    await request_repo.save(make_request(1))
    await document_repo.save(
        Document(
            id=DocumentId(3),
            entity_type="contract",
            entity_id=1,
            file_name="certificate.pdf",
            file_path="uploads/1/certificate.pdf",
            uploaded_by="clerk-1",
        )
    )
    await document_repo.save(
        Document(
            id=DocumentId(4),
            entity_type="contract",
            entity_id=1,
            file_name="invoice.pdf",
            file_path="uploads/1/invoice.pdf",
            uploaded_by="clerk-1",
        )
    )
    # Placeholder written by the upload flow
    await vote_repo.append(
        make_vote(
            VoteDecision.PENDING,
            voter_id="clerk-1",
            subject_type=SubjectType.DOCUMENT,
            subject_id=3,
            file_name="certificate.pdf",
            file_path="uploads/1/certificate.pdf",
        )
    )


def _client() -> TestClient:
    test_container = build_test_container()
    asyncio.run(_seed(test_container))
    return TestClient(create_app(test_container))


@pytest.fixture
def client():
    """Create test client backed by a seeded in-memory container."""
    return _client()


def _auth(voter_id: str) -> dict[str, str]:
    return {"auth_token": make_token(voter_id)}


class TestSubmitVote:
    """End-to-end tests for POST /votes/{subject_type}/{subject_id}."""

    def test_submit_requires_authentication(self, client):
        response = client.post("/votes/contract/1", json={"decision": "approve"})

        assert response.status_code == 401

    def test_submit_with_invalid_token_fails(self, client):
        response = client.post(
            "/votes/contract/1",
            json={"decision": "approve"},
            cookies={"auth_token": "invalid-token"},
        )

        assert response.status_code == 401

    def test_submit_returns_aggregate(self, client):
        response = client.post(
            "/votes/contract/1",
            json={"decision": "approve"},
            cookies=_auth("manager-1"),
        )

        assert response.status_code == 201
        data = response.json()
        assert data["subject_type"] == "contract"
        assert data["decision"]["status"] == "approved"
        assert data["decision"]["approvals"] == 1
        assert data["decision"]["total"] == 1

    def test_second_vote_conflicts(self, client):
        client.post(
            "/votes/request/1", json={"decision": "yes"}, cookies=_auth("manager-1")
        )

        response = client.post(
            "/votes/request/1",
            json={"decision": "no", "comment": "Reconsidered"},
            cookies=_auth("manager-1"),
        )

        assert response.status_code == 409
        votes = client.get("/votes/request/1").json()["votes"]
        assert [v["decision"] for v in votes] == ["approve"]

    def test_rejection_without_comment_is_bad_request(self, client):
        response = client.post(
            "/votes/contract/1",
            json={"decision": "reject", "comment": "  "},
            cookies=_auth("manager-1"),
        )

        assert response.status_code == 400
        assert "comment required" in response.json()["detail"]

    def test_unknown_decision_is_bad_request(self, client):
        response = client.post(
            "/votes/contract/1",
            json={"decision": "abstain"},
            cookies=_auth("manager-1"),
        )

        assert response.status_code == 400

    def test_unknown_subject_is_not_found(self, client):
        response = client.post(
            "/votes/contract/999",
            json={"decision": "approve"},
            cookies=_auth("manager-1"),
        )

        assert response.status_code == 404

    def test_reads_token_from_configured_cookie(self, monkeypatch):
        monkeypatch.setenv("AUTH__COOKIE_NAME", "tally_session")
        client = _client()
        token = make_token("manager-1")

        default_cookie = client.post(
            "/votes/contract/1",
            json={"decision": "approve"},
            cookies={"auth_token": token},
        )
        configured_cookie = client.post(
            "/votes/contract/1",
            json={"decision": "approve"},
            cookies={"tally_session": token},
        )

        assert default_cookie.status_code == 401
        assert configured_cookie.status_code == 201

    def test_file_reference_on_contract_is_bad_request(self, client):
        response = client.post(
            "/votes/contract/1",
            json={"decision": "approve", "file_name": "invoice.pdf"},
            cookies=_auth("manager-1"),
        )

        assert response.status_code == 400
        assert client.get("/votes/contract/1").json()["votes"] == []

    def test_unknown_subject_type_is_rejected(self, client):
        response = client.post(
            "/votes/invoice/1",
            json={"decision": "approve"},
            cookies=_auth("manager-1"),
        )

        assert response.status_code == 422


class TestReadVotes:
    """End-to-end tests for the vote read endpoints."""

    def test_decision_of_subject_without_votes(self, client):
        response = client.get("/votes/contract/1/decision")

        assert response.status_code == 200
        assert response.json()["decision"]["status"] == "no_votes"

    def test_decision_reflects_rejection(self, client):
        client.post(
            "/votes/contract/1", json={"decision": "approve"}, cookies=_auth("a")
        )
        client.post(
            "/votes/contract/1",
            json={"decision": "reject", "comment": "Price above budget"},
            cookies=_auth("b"),
        )

        response = client.get("/votes/contract/1/decision")

        decision = response.json()["decision"]
        assert decision["status"] == "rejected"
        assert decision["approvals"] == 1
        assert decision["rejections"] == 1

    def test_missing_subject_is_not_found(self, client):
        assert client.get("/votes/request/42/decision").status_code == 404
        assert client.get("/votes/request/42").status_code == 404

    def test_document_groups_include_placeholder(self, client):
        response = client.post(
            "/votes/document/3",
            json={
                "decision": "accept",
                "file_name": "certificate.pdf",
                "file_path": "uploads/1/certificate.pdf",
            },
            cookies=_auth("clerk-1"),
        )
        assert response.status_code == 201
        assert response.json()["decision"]["status"] == "pending_review"

        groups = client.get("/votes/document/3/documents").json()["groups"]

        assert len(groups) == 1
        assert groups[0]["document_id"] == 3
        assert groups[0]["file_name"] == "certificate.pdf"
        assert groups[0]["decision"]["pending"] == 1
        assert groups[0]["decision"]["approvals"] == 1
        assert [v["voter_id"] for v in groups[0]["votes"]] == ["clerk-1", "clerk-1"]

    def test_document_groups_of_contract(self, client):
        """One voter approves the contract and votes on each of its documents."""
        for path, body in [
            ("/votes/contract/1", {"decision": "approve"}),
            ("/votes/document/3", {"decision": "approve"}),
            ("/votes/document/4", {"decision": "reject", "comment": "Wrong total"}),
        ]:
            response = client.post(path, json=body, cookies=_auth("manager-1"))
            assert response.status_code == 201

        groups = client.get("/votes/contract/1/documents").json()["groups"]

        assert [g["document_id"] for g in groups] == [3, 4]
        assert groups[0]["file_path"] == "uploads/1/certificate.pdf"
        assert groups[0]["decision"]["status"] == "pending_review"
        assert groups[1]["decision"]["status"] == "rejected"
        assert all(g["file_name"] is not None for g in groups)
        contract = client.get("/votes/contract/1/decision").json()["decision"]
        assert contract["status"] == "approved"
