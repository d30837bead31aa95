"""
sigauth.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Hide secrets from repr/logging (e.g., token signing secret).
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Single settings object built at process start and passed to `create_app`.
    Connection details for both collaborators (key registry DB, token issuer) live here.
    """

    model_config = SettingsConfigDict(env_prefix="SIGAUTH_", case_sensitive=False)

    # Environment controls toggle behavior like auto-init DB tables.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "sigauth"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Key registry
    database_url: str = "sqlite+aiosqlite:///./sigauth.db"

    # Token issuer
    token_issuer_mode: Literal["local", "http"] = "local"
    token_alg: str = "HS256"
    token_issuer: str = "sigauth"
    token_audience: str = "sigauth-session"
    token_secret: str = Field(default="dev-secret-change-me", repr=False)
    # Session credentials are capped at one hour.
    token_ttl_seconds: int = Field(default=3600, ge=1, le=3600)

    token_issuer_url: str = "http://localhost:9090"
    token_issuer_timeout_seconds: float = Field(default=5.0, gt=0)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# `token_issuer_mode` selects the TokenIssuer implementation in `api.app`;
# the handler itself never reads settings.
