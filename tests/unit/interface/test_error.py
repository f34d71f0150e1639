"""Unit tests for domain error translation."""

import pytest

from tally.domain.error import (
    DataIntegrityError,
    DomainError,
    DuplicateVoterError,
    NotFoundError,
    ValidationError,
)
from tally.interface.error import http_error


@pytest.mark.parametrize(
    "error,status_code",
    [
        (ValidationError("comment required on rejection"), 400),
        (NotFoundError("contract", "9"), 404),
        (DuplicateVoterError("contract", 1, "manager-1"), 409),
        (DataIntegrityError("votes", "decision", "abstain"), 500),
        (DomainError("unexpected"), 500),
    ],
)
def test_status_codes(error, status_code):
    assert http_error(error).status_code == status_code


def test_client_errors_carry_message():
    assert http_error(NotFoundError("contract", "9")).detail == "contract not found: 9"


def test_server_errors_hide_message():
    exc = http_error(DataIntegrityError("votes", "decision", "abstain"))

    assert "abstain" not in exc.detail
