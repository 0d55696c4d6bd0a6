"""Caller authentication service."""

import logfire

from forum.config import AuthSettings
from forum.util.jwt import (
    AccessTokenClaims,
    InvalidAccessTokenError,
    decode_access_token,
    encode_access_token,
)


class AuthenticationService:
    """Turns access tokens into authenticated user ids."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def issue_token(self, user_id: str, username: str) -> str:
        """Sign an access token for a user."""
        token = encode_access_token(user_id, username, self.auth_settings)
        logfire.debug("Access token issued", user_id=user_id)
        return token

    def authenticate(self, token: str) -> AccessTokenClaims:
        """Verify a token and return its claims.

        Raises:
            InvalidAccessTokenError: If the token cannot be trusted
        """
        with logfire.span("authentication.authenticate"):
            try:
                claims = decode_access_token(token, self.auth_settings)
            except InvalidAccessTokenError as e:
                logfire.warn("Access token rejected", reason=str(e))
                raise
            return claims

    def resolve_caller(self, token: str | None) -> AccessTokenClaims | None:
        """Return the claims of a token, or None for a missing or bad token."""
        if not token:
            return None
        try:
            return self.authenticate(token)
        except InvalidAccessTokenError:
            return None
