"""
sigauth.token_issuers.http

HTTP client boundary for a remote token issuance service.

Responsibilities:
- Request a session credential for a user id from the remote issuer.
- Convert transport failures and malformed responses into `TokenIssuerError`.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

import httpx

from sigauth.auth.models import SessionCredential
from sigauth.services.errors import TokenIssuerError


class HttpTokenIssuer:
    """
    Talks to `POST /v1/tokens` on the configured issuer.
    The `httpx.AsyncClient` (base_url, timeout) is owned by the composition root.
    """

    def __init__(self, *, http: httpx.AsyncClient) -> None:
        self._http = http

    async def mint(self, user_id: str) -> SessionCredential:
        try:
            r = await self._http.post("/v1/tokens", json={"uid": user_id})
            r.raise_for_status()
            body: Any = r.json()
        except httpx.HTTPError as e:
            raise TokenIssuerError(f"token issuer request failed: {e}") from e
        except ValueError as e:
            raise TokenIssuerError("token issuer returned invalid JSON") from e

        token = body.get("token") if isinstance(body, dict) else None
        if not isinstance(token, str) or not token:
            raise TokenIssuerError("token issuer response has no token")

        return SessionCredential(
            user_id=user_id,
            token=token,
            expires_at=_parse_expiry(body.get("expiresAt")),
        )


def _parse_expiry(raw: Any) -> datetime | None:
    if not isinstance(raw, str):
        return None
    try:
        return datetime.fromisoformat(raw)
    except ValueError:
        return None


# --- Module Notes -----------------------------------------------------------
# No retries here; a failed mint reaches the caller as `internal`.
