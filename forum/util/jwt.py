"""Access token encoding and decoding.

Access tokens are HMAC-signed JWTs whose claims hold the user ``id`` and
``username``, plus the ``exp`` expiry that PyJWT checks on decode.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from forum.config import AuthSettings


class AccessTokenClaims(BaseModel):
    """Claims carried by an access token."""

    model_config = ConfigDict(frozen=True)

    id: str
    username: str
    exp: datetime


class InvalidAccessTokenError(Exception):
    """The token is malformed, badly signed, expired or incomplete."""


def encode_access_token(
    user_id: str,
    username: str,
    settings: AuthSettings,
    issued_at: datetime | None = None,
) -> str:
    """Sign an access token for a user.

    The identity system issues tokens in production. Local tooling and tests
    use this to act as an authenticated caller.
    """
    issued_at = issued_at or datetime.now(timezone.utc)
    claims = {
        "id": user_id,
        "username": username,
        "exp": issued_at + timedelta(seconds=settings.access_token_age),
    }
    return jwt.encode(claims, settings.access_token_key, algorithm=settings.algorithm)


def decode_access_token(token: str, settings: AuthSettings) -> AccessTokenClaims:
    """Verify the signature and expiry of a token and return its claims.

    Raises:
        InvalidAccessTokenError: If the token cannot be trusted
    """
    try:
        raw = jwt.decode(
            token,
            settings.access_token_key,
            algorithms=[settings.algorithm],
            leeway=settings.leeway,
            options={"require": ["exp"]},
        )
        return AccessTokenClaims.model_validate(raw)
    except jwt.ExpiredSignatureError as e:
        raise InvalidAccessTokenError("Access token has expired") from e
    except jwt.InvalidTokenError as e:
        raise InvalidAccessTokenError("Access token is invalid") from e
    except PydanticValidationError as e:
        raise InvalidAccessTokenError("Access token claims are incomplete") from e
