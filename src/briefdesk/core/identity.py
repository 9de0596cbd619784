"""Client for the hosted identity provider (GoTrue-compatible auth API).

Only the calls the briefing workflow needs are wrapped: admin user management
with the service-role key, and password sign-in / session lookup / sign-out with
the anonymous key. There is no retry policy; every call is fire-once with the
configured timeout.
"""

from typing import Any

import httpx
from pydantic import BaseModel, Field

from src.briefdesk.core.config import Settings, get_settings
from src.briefdesk.core.exceptions import ConfigurationError
from src.briefdesk.core.logging import get_logger

logger = get_logger(__name__)

TEMP_BRIEFING_FLAG = "temp_briefing"
PROJECT_ID_KEY = "project_id"

_client: "IdentityClient | None" = None


class IdentityProviderError(Exception):
    """Non-2xx response (or transport failure) from the identity provider."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class IdentityUser(BaseModel):
    """User record as returned by the identity provider."""

    id: str
    email: str | None = None
    app_metadata: dict[str, Any] = Field(default_factory=dict)
    user_metadata: dict[str, Any] = Field(default_factory=dict)

    model_config = {"extra": "ignore"}

    @property
    def is_temporary(self) -> bool:
        """True for scoped identities issued for a single project's briefing."""
        return bool(
            self.app_metadata.get(TEMP_BRIEFING_FLAG) or self.user_metadata.get(TEMP_BRIEFING_FLAG)
        )

    @property
    def project_id(self) -> str | None:
        value = self.app_metadata.get(PROJECT_ID_KEY) or self.user_metadata.get(PROJECT_ID_KEY)
        return str(value) if value else None


class IdentitySession(BaseModel):
    """Session established by a password sign-in."""

    access_token: str
    refresh_token: str | None = None
    token_type: str = "bearer"
    expires_in: int | None = None
    user: IdentityUser

    model_config = {"extra": "ignore"}


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict):
        for key in ("msg", "error_description", "message", "error"):
            if body.get(key):
                return str(body[key])
    return response.reason_phrase


class IdentityClient:
    """Thin async wrapper over the identity provider's REST API."""

    def __init__(
        self,
        base_url: str,
        anon_key: str,
        service_role_key: str | None,
        http: httpx.AsyncClient,
    ):
        self.base_url = base_url.rstrip("/")
        self.anon_key = anon_key
        self.service_role_key = service_role_key
        self.http = http

    @classmethod
    def from_settings(
        cls, settings: Settings, transport: httpx.AsyncBaseTransport | None = None
    ) -> "IdentityClient":
        http = httpx.AsyncClient(timeout=settings.identity_timeout_seconds, transport=transport)
        return cls(
            settings.identity_url,
            settings.identity_anon_key,
            settings.identity_service_role_key,
            http,
        )

    @property
    def has_service_role(self) -> bool:
        return bool(self.service_role_key)

    def _url(self, path: str) -> str:
        return f"{self.base_url}/auth/v1{path}"

    def _admin_headers(self) -> dict[str, str]:
        if not self.service_role_key:
            raise ConfigurationError("Identity service-role key is not configured")
        return {
            "apikey": self.service_role_key,
            "Authorization": f"Bearer {self.service_role_key}",
        }

    def _public_headers(self, access_token: str | None = None) -> dict[str, str]:
        headers = {"apikey": self.anon_key}
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        headers: dict[str, str],
        **kwargs: Any,
    ) -> httpx.Response:
        try:
            response = await self.http.request(method, self._url(path), headers=headers, **kwargs)
        except httpx.HTTPError as e:
            raise IdentityProviderError(503, f"Identity provider unreachable: {e}") from e
        if response.is_error:
            raise IdentityProviderError(response.status_code, _error_message(response))
        return response

    # Admin API (service-role key)

    async def create_user(
        self,
        email: str,
        password: str,
        *,
        app_metadata: dict[str, Any] | None = None,
        user_metadata: dict[str, Any] | None = None,
    ) -> IdentityUser:
        """Create a pre-confirmed user (no email verification step)."""
        response = await self._request(
            "POST",
            "/admin/users",
            self._admin_headers(),
            json={
                "email": email,
                "password": password,
                "email_confirm": True,
                "app_metadata": app_metadata or {},
                "user_metadata": user_metadata or {},
            },
        )
        return IdentityUser.model_validate(response.json())

    async def delete_user(self, user_id: str) -> None:
        await self._request("DELETE", f"/admin/users/{user_id}", self._admin_headers())

    async def list_users(self, page: int = 1, per_page: int = 50) -> list[IdentityUser]:
        response = await self._request(
            "GET",
            "/admin/users",
            self._admin_headers(),
            params={"page": page, "per_page": per_page},
        )
        body = response.json()
        users = body.get("users", []) if isinstance(body, dict) else body
        return [IdentityUser.model_validate(u) for u in users]

    # Public API (anonymous key)

    async def sign_in_with_password(self, email: str, password: str) -> IdentitySession:
        response = await self._request(
            "POST",
            "/token",
            self._public_headers(),
            params={"grant_type": "password"},
            json={"email": email, "password": password},
        )
        return IdentitySession.model_validate(response.json())

    async def get_user(self, access_token: str) -> IdentityUser | None:
        """Resolve an access token to its user. Returns None if the token is rejected."""
        try:
            response = await self._request("GET", "/user", self._public_headers(access_token))
        except IdentityProviderError as e:
            if e.status_code in (401, 403, 404):
                return None
            raise
        return IdentityUser.model_validate(response.json())

    async def sign_out(self, access_token: str) -> None:
        await self._request("POST", "/logout", self._public_headers(access_token))

    async def aclose(self) -> None:
        await self.http.aclose()


def get_identity_client() -> IdentityClient:
    """Get or create the identity client singleton."""
    global _client
    if _client is None:
        settings = get_settings()
        if not settings.identity_configured:
            logger.warning("Identity provider not configured (IDENTITY_URL / IDENTITY_ANON_KEY)")
        _client = IdentityClient.from_settings(settings)
    return _client


async def close_identity_client() -> None:
    """Close the identity client. Call during shutdown."""
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None


class AuthContext:
    """Explicit per-request session: who is calling, with which token."""

    __slots__ = ("user", "access_token")

    def __init__(self, user: IdentityUser, access_token: str):
        self.user = user
        self.access_token = access_token

    @property
    def is_temporary(self) -> bool:
        return self.user.is_temporary

    def __repr__(self) -> str:
        return f"AuthContext(user_id={self.user.id!r}, temporary={self.is_temporary})"
