"""Caller authentication for API routes.

Tokens are accepted from the ``Authorization: Bearer`` header first, then
from the auth cookie.
"""

from fastapi import HTTPException, status

from forum.domain.repository import UserRepository
from forum.domain.service import AuthenticationService
from forum.domain.value import UserId

BEARER_PREFIX = "bearer "
MISSING_AUTHENTICATION = "Missing authentication"


def extract_token(authorization: str | None, auth_token: str | None) -> str | None:
    """Pick the token sent with a request.

    Args:
        authorization: Raw Authorization header value
        auth_token: Token from the auth cookie

    Returns:
        The token, or None if the request carries none
    """
    if authorization and authorization.lower().startswith(BEARER_PREFIX):
        token = authorization[len(BEARER_PREFIX) :].strip()
        if token:
            return token
    return auth_token or None


async def authenticate_caller(
    authentication: AuthenticationService,
    users: UserRepository,
    authorization: str | None,
    auth_token: str | None,
) -> UserId:
    """Resolve the authenticated caller or reject the request with a 401.

    The caller's username is recorded from the token claims, so content they
    write can always be attributed, even on their first request.
    """
    claims = authentication.resolve_caller(extract_token(authorization, auth_token))
    if claims is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=MISSING_AUTHENTICATION,
            headers={"WWW-Authenticate": "Bearer"},
        )
    user_id = UserId(claims.id)
    await users.add_user(user_id, claims.username)
    return user_id
