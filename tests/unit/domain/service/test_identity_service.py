"""Unit tests for IdentityService."""

from datetime import datetime, timedelta, timezone

from tally.config import AuthSettings
from tally.domain.service import IdentityService
from tests.conftest import make_token

SETTINGS = AuthSettings(jwt_secret="test-secret")


def test_valid_token_yields_voter_id():
    service = IdentityService(auth_settings=SETTINGS)

    assert service.get_voter_id_from_token(make_token("manager-7", SETTINGS)) == "manager-7"


def test_missing_token_is_anonymous():
    service = IdentityService(auth_settings=SETTINGS)

    assert service.get_voter_id_from_token(None) is None
    assert service.get_voter_id_from_token("") is None


def test_wrong_secret_is_anonymous():
    service = IdentityService(auth_settings=SETTINGS)
    token = make_token("manager-7", AuthSettings(jwt_secret="other-secret"))

    assert service.get_voter_id_from_token(token) is None


def test_expired_token_is_anonymous():
    service = IdentityService(auth_settings=SETTINGS)
    token = make_token(
        "manager-7", SETTINGS, exp=datetime.now(timezone.utc) - timedelta(minutes=1)
    )

    assert service.get_voter_id_from_token(token) is None


def test_custom_voter_claim():
    settings = AuthSettings(jwt_secret="test-secret", voter_claim="sub")
    service = IdentityService(auth_settings=settings)

    assert service.get_voter_id_from_token(make_token("manager-2", settings)) == "manager-2"


def test_token_without_voter_claim_is_anonymous():
    service = IdentityService(auth_settings=SETTINGS)
    token = make_token("manager-7", AuthSettings(jwt_secret="test-secret", voter_claim="sub"))

    assert service.get_voter_id_from_token(token) is None
