"""
sigauth.auth.models

Auth domain models.

Responsibilities:
- Define the registered public key record (`KeyRecord`).
- Define the minted session credential (`SessionCredential`) returned to callers.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class KeyRecord:
    """
    Public key registered for a user during enrollment. Read-only to this service.
    """

    user_id: str
    # PEM-encoded SubjectPublicKeyInfo.
    public_key: str


@dataclass(frozen=True, slots=True)
class SessionCredential:
    """
    Opaque signed token bound to `user_id`.
    """

    user_id: str
    token: str
    expires_at: datetime | None = None


# --- Module Notes -----------------------------------------------------------
# Keep these models free of persistence concerns; the ORM row lives in `db.models`.
