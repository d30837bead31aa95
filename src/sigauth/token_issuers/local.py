"""
sigauth.token_issuers.local

In-process token issuer backed by PyJWT.

Responsibilities:
- Mint signed, time-bounded session tokens for an authenticated user id.
"""

from __future__ import annotations

from datetime import timedelta

from jwt import PyJWTError

from sigauth.auth.jwt import JwtConfig, issue_token
from sigauth.auth.models import SessionCredential
from sigauth.services.errors import TokenIssuerError
from sigauth.settings import Settings


def jwt_config(settings: Settings) -> JwtConfig:
    return JwtConfig(
        alg=settings.token_alg,
        issuer=settings.token_issuer,
        audience=settings.token_audience,
        secret=settings.token_secret,
    )


class JwtTokenIssuer:
    def __init__(self, *, cfg: JwtConfig, ttl: timedelta) -> None:
        self._cfg = cfg
        self._ttl = ttl

    @classmethod
    def from_settings(cls, settings: Settings) -> JwtTokenIssuer:
        return cls(cfg=jwt_config(settings), ttl=timedelta(seconds=settings.token_ttl_seconds))

    async def mint(self, user_id: str) -> SessionCredential:
        try:
            token, expires_at = issue_token(cfg=self._cfg, subject=user_id, ttl=self._ttl)
        except (PyJWTError, NotImplementedError, ValueError, TypeError) as e:
            # Misconfigured algorithm/key material surfaces as an issuer failure.
            raise TokenIssuerError(f"token signing failed: {e}") from e
        return SessionCredential(user_id=user_id, token=token, expires_at=expires_at)


# --- Module Notes -----------------------------------------------------------
# Selected when `Settings.token_issuer_mode == "local"` (the default).
