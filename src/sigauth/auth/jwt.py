"""
sigauth.auth.jwt

JWT session-token issuing and validation helpers.

Responsibilities:
- Issue short-lived session tokens bound to a user id (`sub` and `uid` claims).
- Decode and validate tokens with strict claim requirements (iss/aud/exp/iat/sub).

Note:
- HS256 with a shared secret is the default; any PyJWT algorithm works if the
  configured key material matches it.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from jwt import InvalidTokenError


@dataclass(frozen=True, slots=True)
class JwtConfig:
    # Algorithm/issuer/audience are enforced during decoding.
    alg: str
    issuer: str
    audience: str
    secret: str


class JwtValidationError(Exception):
    pass


def issue_token(
    *,
    cfg: JwtConfig,
    subject: str,
    ttl: timedelta = timedelta(hours=1),
    now: datetime | None = None,
) -> tuple[str, datetime]:
    """
    Returns the encoded token and its expiry instant.
    """

    now = now or datetime.now(tz=UTC)
    expires_at = now + ttl
    payload: dict[str, Any] = {
        "iss": cfg.issuer,
        "aud": cfg.audience,
        "sub": subject,
        "uid": subject,
        "iat": int(now.timestamp()),
        "exp": int(expires_at.timestamp()),
    }
    return jwt.encode(payload, cfg.secret, algorithm=cfg.alg), expires_at


def decode_and_validate(*, cfg: JwtConfig, token: str) -> dict[str, Any]:
    try:
        # jwt.decode enforces signature + registered claims (issuer/audience/exp, etc.).
        return jwt.decode(
            token,
            cfg.secret,
            algorithms=[cfg.alg],
            issuer=cfg.issuer,
            audience=cfg.audience,
            options={
                "require": ["exp", "iat", "iss", "aud", "sub"],
            },
        )
    except InvalidTokenError as e:
        raise JwtValidationError(str(e)) from e


# --- Module Notes -----------------------------------------------------------
# Token issuing is used by `token_issuers.local.JwtTokenIssuer`.
# Validation is for downstream consumers and tests; this service never consumes tokens.
