"""Bearer token authentication for routes."""

from fastapi import Header

from qna.domain.service import JWTService
from qna.interface.error import AuthenticationRequiredError


def bearer_token(authorization: str | None = Header(default=None)) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def require_user_id(jwt_service: JWTService, token: str | None, action: str) -> str:
    """Resolve the authenticated user ID.

    Args:
        jwt_service: JWT service for token verification
        token: Bearer token, if any
        action: What the caller is trying to do, for the error message

    Raises:
        AuthenticationRequiredError: If the token is missing or invalid
    """
    user_id = jwt_service.get_user_id_from_token(token)
    if not user_id:
        raise AuthenticationRequiredError(f"Authentication required to {action}")
    return user_id
