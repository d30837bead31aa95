"""
sigauth.services.ports

Collaborator interfaces consumed by `SignatureAuthHandler`.

Responsibilities:
- `KeyRegistry`: user id -> registered public key lookup.
- `TokenIssuer`: session credential minting for an authenticated user id.
"""

from __future__ import annotations

from typing import Protocol

from sigauth.auth.models import KeyRecord, SessionCredential


class KeyRegistry(Protocol):
    async def get(self, user_id: str) -> KeyRecord | None:
        """
        Return the record for `user_id`, or None when nothing is registered.
        Raises `KeyRegistryError` on infrastructure failure.
        """
        ...


class TokenIssuer(Protocol):
    async def mint(self, user_id: str) -> SessionCredential:
        """
        Raises `TokenIssuerError` on infrastructure failure.
        """
        ...


# --- Module Notes -----------------------------------------------------------
# Implementations: `db.repositories.keys.KeyRepo`, `token_issuers.local.JwtTokenIssuer`,
# `token_issuers.http.HttpTokenIssuer`.
