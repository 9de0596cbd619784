from src.briefdesk.core.identity import IdentityClient, IdentityProviderError, IdentitySession
from src.briefdesk.core.logging import get_logger
from src.briefdesk.services.intake_service import InvalidCredentials

logger = get_logger(__name__)


class AuthService:
    """Owner sign-in against the identity provider."""

    def __init__(self, identity: IdentityClient):
        self.identity = identity

    async def login(self, email: str, password: str) -> IdentitySession:
        """Sign in the owner. Temporary briefing identities are refused.

        Raises:
            InvalidCredentials: On any failure, without saying which
        """
        try:
            session = await self.identity.sign_in_with_password(email, password)
        except IdentityProviderError as e:
            logger.info("Owner login rejected", status_code=e.status_code)
            raise InvalidCredentials() from e

        if session.user.is_temporary:
            await self.logout(session.access_token)
            logger.info("Owner login refused for temporary identity", user_id=session.user.id)
            raise InvalidCredentials()

        logger.info("Owner login", user_id=session.user.id)
        return session

    async def logout(self, access_token: str) -> None:
        try:
            await self.identity.sign_out(access_token)
        except IdentityProviderError as e:
            logger.info("Sign-out failed", status_code=e.status_code)
