"""Voter identity domain service."""

import logfire

from tally.config import AuthSettings
from tally.domain.value import VoterId
from tally.util.jwt import JWTError, verify_token

from .base import Service


class IdentityService(Service):
    """Resolves the voter behind a request from its auth token."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize identity service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def get_voter_id_from_token(self, token: str | None) -> VoterId | None:
        """Extract the voter ID from a JWT token without raising.

        Args:
            token: JWT token string (optional)

        Returns:
            Voter ID if the token is valid, None if missing or invalid
        """
        if not token:
            return None

        try:
            payload = verify_token(token, self.auth_settings)
        except JWTError as e:
            logfire.warn("Token rejected, treating as anonymous", error=str(e))
            return None
        return VoterId(payload.voter_id)
