from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "briefdesk"
    app_env: str = "development"  # development, testing, production
    debug: bool = False
    enable_openapi: bool = True

    # Logging
    log_user_emails: bool = False  # Keep False in production (GDPR)

    # Database
    database_url: str
    database_pool_size: int = 5
    database_max_overflow: int = 10

    # Identity provider (GoTrue-compatible auth API)
    identity_url: str = ""
    identity_anon_key: str = ""
    identity_service_role_key: str | None = None  # Required by the temporary-access endpoints
    identity_timeout_seconds: float = 10.0
    identity_user_scan_limit: int = 1000

    # Temporary briefing credentials
    temp_credential_ttl_hours: int = 24

    # Frontend URL used to build briefing links
    app_url: str = "http://localhost:3000"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Metrics
    metrics_api_key: str | None = None  # If set, /metrics requires this key

    # Rate limiting (slowapi limit string)
    login_rate_limit: str = "10/minute"

    @field_validator("cors_origins")
    @classmethod
    def validate_cors_origins(cls, v: list[str]) -> list[str]:
        """Validate CORS origins - reject wildcards when credentials are used."""
        for origin in v:
            if origin == "*":
                raise ValueError(
                    "CORS wildcard '*' is not allowed when allow_credentials=True. "
                    "Specify explicit origins instead."
                )
        return v

    @field_validator("identity_url")
    @classmethod
    def strip_identity_url(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def identity_configured(self) -> bool:
        """True when the public identity endpoints can be called."""
        return bool(self.identity_url and self.identity_anon_key)


@lru_cache
def get_settings() -> Settings:
    return Settings()
