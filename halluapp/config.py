"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    secret_key: str = Field(
        description="Secret key for signing session tokens", min_length=1
    )
    access_token_expire_minutes: int = Field(
        default=120,
        description="Number of minutes before a session token expires",
        gt=0,
    )
    app_url: str = Field(
        default="http://localhost:8000",
        description="Absolute base URL used to build default invite links",
    )
    session_cookie_name: str = Field(default="halluapp_session", min_length=1)
    session_cookie_secure: bool = False
    firebase_project_id: str | None = Field(
        default=None,
        description="Firebase project whose ID tokens are accepted",
    )
    firebase_credentials_file: str | None = Field(
        default=None,
        description="Path to a Firebase service account JSON file",
    )
    trust_client_identity_claims: bool = Field(
        default=False,
        description=(
            "Accept unverified {email, name, firebase_uid} bodies on the identity "
            "login endpoint when no ID token is sent"
        ),
    )
    default_role_slug: str = Field(default="customer", min_length=1)
    invitation_code_max_attempts: int = Field(default=10, gt=0)
    invitations_per_page: int = Field(default=10, gt=0)
    seed_roles_on_startup: bool = True
    log_level: str = "INFO"
    cors_origins: str = ""

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
