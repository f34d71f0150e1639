"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from uuid import uuid4

import jwt

from tally.config import AuthSettings, Settings
from tally.domain.model import (
    Contract,
    Document,
    LetterOfCredit,
    Request,
    Vessel,
    Vote,
)
from tally.domain.value import (
    ContractId,
    DocumentId,
    LetterOfCreditId,
    RequestId,
    SubjectId,
    SubjectType,
    VesselId,
    VoteDecision,
    VoteId,
    VoterId,
)


def make_token(voter_id: str, settings: AuthSettings | None = None, **claims) -> str:
    """Issue a token the way the surrounding application does.

    Args:
        voter_id: Value of the voter claim
        settings: Auth settings to sign with (defaults from environment)
        **claims: Extra or overriding claims

    Returns:
        Encoded JWT
    """
    settings = settings or Settings().auth
    payload = {
        settings.voter_claim: voter_id,
        "exp": datetime.now(timezone.utc) + timedelta(hours=1),
        **claims,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def make_vote(
    decision: VoteDecision,
    voter_id: str = "manager-1",
    subject_type: SubjectType = SubjectType.CONTRACT,
    subject_id: int = 1,
    comment: str | None = None,
    created_at: datetime | None = None,
    file_name: str | None = None,
    file_path: str | None = None,
) -> Vote:
    """Build a vote, filling in a comment for rejections."""
    if decision is VoteDecision.REJECT and comment is None:
        comment = "Quantity does not match the request"
    return Vote(
        id=VoteId(uuid4()),
        subject_type=subject_type,
        subject_id=SubjectId(subject_id),
        voter_id=VoterId(voter_id),
        decision=decision,
        comment=comment,
        file_name=file_name,
        file_path=file_path,
        created_at=created_at or datetime.now(timezone.utc),
    )


def make_contract(contract_id: int = 1, quantity: str | None = "1000") -> Contract:
    return Contract(
        id=ContractId(contract_id),
        supplier_name="Nordic Grain AB",
        cargo_type="wheat",
        quantity=Decimal(quantity) if quantity is not None else None,
    )


def make_request(request_id: int = 1) -> Request:
    return Request(id=RequestId(request_id), title="Q3 wheat import", quantity=Decimal("5000"))


def make_letter_of_credit(lc_id: int = 1, quantity: str | None = "1000") -> LetterOfCredit:
    return LetterOfCredit(
        id=LetterOfCreditId(lc_id),
        lc_number=f"LC-{lc_id:04d}",
        currency="USD",
        quantity=Decimal(quantity) if quantity is not None else None,
    )


def make_vessel(
    vessel_id: int,
    quantity: str | None,
    contract_id: int | None = 1,
) -> Vessel:
    return Vessel(
        id=VesselId(vessel_id),
        contract_id=ContractId(contract_id) if contract_id is not None else None,
        vessel_name=f"MV Vessel {vessel_id}",
        quantity=Decimal(quantity) if quantity is not None else None,
    )


def make_document(
    document_id: int,
    file_name: str,
    entity_type: str = "contract",
    entity_id: int = 1,
    created_at: datetime | None = None,
) -> Document:
    return Document(
        id=DocumentId(document_id),
        entity_type=entity_type,
        entity_id=entity_id,
        file_name=file_name,
        file_path=f"uploads/{entity_id}/{file_name}",
        uploaded_by="clerk-1",
        created_at=created_at,
    )
