"""JWT token utilities.

Tokens are issued by the surrounding application. This service only
verifies them to learn who is voting.
"""

from datetime import datetime

import jwt
from pydantic import BaseModel

from tally.config import AuthSettings


class TokenPayload(BaseModel):
    """The part of a JWT payload the voting core relies on."""

    voter_id: str
    exp: datetime | None = None


class JWTError(Exception):
    """JWT-related error."""

    pass


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid, expired or has no voter claim
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    voter_id = payload.get(settings.voter_claim)
    if not voter_id:
        raise JWTError(f"Token has no {settings.voter_claim} claim")
    return TokenPayload(voter_id=str(voter_id), exp=payload.get("exp"))
