"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.

Enum columns are stored as plain strings. Parsing them back is strict: a
value the domain does not know raises DataIntegrityError instead of being
defaulted, so a corrupted or newer row can never be tallied as something
it is not.
"""

from enum import Enum
from typing import Any, Dict, Type, TypeVar
from uuid import UUID

import logfire
from pydantic import ValidationError as PydanticValidationError

from tally.domain.error import DataIntegrityError
from tally.domain.model import (
    Contract,
    Document,
    LetterOfCredit,
    Request,
    Vessel,
    VesselLetterOfCredit,
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
    VesselLetterOfCreditId,
    VoteDecision,
    VoteId,
    VoterId,
)

E = TypeVar("E", bound=Enum)


def _parse_enum(enum_type: Type[E], value: Any, table: str, column: str) -> E:
    try:
        return enum_type(value)
    except ValueError:
        logfire.error(
            "Unrecognized enum value in storage",
            table=table,
            column=column,
            value=str(value),
        )
        raise DataIntegrityError(table, column, value)


def _parse_decision(value: Any) -> VoteDecision:
    # Legacy rows may hold the yes/no/accept spellings
    try:
        return VoteDecision.parse(str(value))
    except ValueError:
        logfire.error(
            "Unrecognized enum value in storage",
            table="votes",
            column="decision",
            value=str(value),
        )
        raise DataIntegrityError("votes", "decision", value)


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model

    Raises:
        DataIntegrityError: If the row holds an unknown subject type or
            decision, or a rejection without comment
    """
    subject_type = _parse_enum(SubjectType, row["subject_type"], "votes", "subject_type")
    decision = _parse_decision(row["decision"])

    try:
        return Vote(
            id=VoteId(UUID(row["id"]) if isinstance(row["id"], str) else row["id"]),
            subject_type=subject_type,
            subject_id=SubjectId(row["subject_id"]),
            voter_id=VoterId(row["voter_id"]),
            decision=decision,
            comment=row.get("comment"),
            file_name=row.get("file_name"),
            file_path=row.get("file_path"),
            created_at=row["created_at"],
        )
    except PydanticValidationError as e:
        logfire.error("Invalid vote row", vote_id=str(row["id"]), error=str(e))
        raise DataIntegrityError("votes", "comment", row.get("comment"))


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict.

    Args:
        vote: Vote domain model

    Returns:
        Dict suitable for database insertion
    """
    return vote.model_dump(mode="json") | {
        "id": vote.id,
        "created_at": vote.created_at,
    }


def row_to_contract(row: Dict[str, Any]) -> Contract:
    """Convert database row to Contract domain model."""
    return Contract(
        id=ContractId(row["id"]),
        request_id=RequestId(row["request_id"]) if row.get("request_id") else None,
        supplier_name=row.get("supplier_name"),
        cargo_type=row.get("cargo_type"),
        quantity=row.get("quantity"),
        status=row["status"],
        created_at=row.get("created_at"),
    )


def contract_to_dict(contract: Contract) -> Dict[str, Any]:
    """Convert Contract domain model to database dict.

    created_at is left to the database default when unset.
    """
    return contract.model_dump(exclude_none=True)


def row_to_letter_of_credit(row: Dict[str, Any]) -> LetterOfCredit:
    """Convert database row to LetterOfCredit domain model."""
    return LetterOfCredit(
        id=LetterOfCreditId(row["id"]),
        lc_number=row.get("lc_number"),
        currency=row.get("currency"),
        quantity=row.get("quantity"),
        status=row["status"],
        created_at=row.get("created_at"),
    )


def letter_of_credit_to_dict(lc: LetterOfCredit) -> Dict[str, Any]:
    """Convert LetterOfCredit domain model to database dict."""
    return lc.model_dump(exclude_none=True)


def row_to_vessel_letter_of_credit(row: Dict[str, Any]) -> VesselLetterOfCredit:
    """Convert database row to VesselLetterOfCredit domain model."""
    return VesselLetterOfCredit(
        id=VesselLetterOfCreditId(row["id"]),
        vessel_id=VesselId(row["vessel_id"]),
        lc_id=LetterOfCreditId(row["lc_id"]),
        quantity=row.get("quantity"),
        notes=row.get("notes"),
        created_at=row.get("created_at"),
    )


def row_to_vessel(row: Dict[str, Any]) -> Vessel:
    """Convert database row to Vessel domain model."""
    return Vessel(
        id=VesselId(row["id"]),
        contract_id=ContractId(row["contract_id"]) if row.get("contract_id") else None,
        vessel_name=row.get("vessel_name"),
        quantity=row.get("quantity"),
        status=row["status"],
        created_at=row.get("created_at"),
    )


def vessel_to_dict(vessel: Vessel) -> Dict[str, Any]:
    """Convert Vessel domain model to database dict."""
    return vessel.model_dump(exclude_none=True)


def row_to_request(row: Dict[str, Any]) -> Request:
    """Convert database row to Request domain model."""
    return Request(
        id=RequestId(row["id"]),
        title=row["title"],
        quantity=row.get("quantity"),
        status=row["status"],
        created_at=row.get("created_at"),
    )


def request_to_dict(request: Request) -> Dict[str, Any]:
    """Convert Request domain model to database dict."""
    return request.model_dump(exclude_none=True)


def row_to_document(row: Dict[str, Any]) -> Document:
    """Convert database row to Document domain model."""
    return Document(
        id=DocumentId(row["id"]),
        entity_type=row["entity_type"],
        entity_id=row["entity_id"],
        file_name=row["file_name"],
        file_path=row["file_path"],
        uploaded_by=row["uploaded_by"],
        created_at=row.get("created_at"),
    )


def document_to_dict(document: Document) -> Dict[str, Any]:
    """Convert Document domain model to database dict."""
    return document.model_dump(exclude_none=True)
