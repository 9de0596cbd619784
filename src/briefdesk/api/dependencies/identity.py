"""Identity provider dependencies."""

from typing import Annotated

from fastapi import Depends

from src.briefdesk.core.identity import IdentityClient, get_identity_client


def get_identity() -> IdentityClient:
    """Get the shared identity provider client."""
    return get_identity_client()


IdentityDep = Annotated[IdentityClient, Depends(get_identity)]
