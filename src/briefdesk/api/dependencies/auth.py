"""Authentication and authorization dependencies.

The caller's session is explicit: a Bearer access token issued by the identity
provider, resolved per request into an ``AuthContext``.
"""

from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from src.briefdesk.api.dependencies.identity import IdentityDep
from src.briefdesk.core.identity import AuthContext, IdentityProviderError
from src.briefdesk.core.logging import bind_identity_context, get_logger

logger = get_logger(__name__)


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization or not authorization.startswith("Bearer "):
        return None
    return authorization[7:].strip() or None


async def get_auth_context(
    identity: IdentityDep,
    authorization: Annotated[str | None, Header()] = None,
) -> AuthContext | None:
    """Resolve the Bearer token, if any. None means unauthenticated."""
    token = _bearer_token(authorization)
    if token is None:
        return None

    try:
        user = await identity.get_user(token)
    except IdentityProviderError as e:
        logger.warning("Token verification failed", status_code=e.status_code, error=e.message)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Identity provider unavailable",
        ) from e

    if user is None:
        return None

    bind_identity_context(user.id, user.email, temporary=user.is_temporary)
    return AuthContext(user=user, access_token=token)


OptionalAuth = Annotated[AuthContext | None, Depends(get_auth_context)]


async def require_authenticated(auth: OptionalAuth) -> AuthContext:
    """Any valid session, temporary or not."""
    if auth is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing or invalid authorization header",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return auth


AuthenticatedUser = Annotated[AuthContext, Depends(require_authenticated)]


async def require_owner(auth: AuthenticatedUser) -> AuthContext:
    """A full owner session. Temporary briefing identities are refused."""
    if auth.is_temporary:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Owner access required",
        )
    return auth


OwnerUser = Annotated[AuthContext, Depends(require_owner)]
