"""
sigauth.db.repositories.keys

Repository for registered public keys (the key registry).

Responsibilities:
- Fetch the `KeyRecord` for a user id.
- Wrap driver/database failures in `KeyRegistryError`.
"""

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from sigauth.auth.models import KeyRecord
from sigauth.db.models import UserKey
from sigauth.services.errors import KeyRegistryError


class KeyRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, user_id: str) -> KeyRecord | None:
        try:
            row = await self._session.get(UserKey, user_id)
        except (SQLAlchemyError, OSError) as e:
            raise KeyRegistryError(f"key lookup failed: {e}") from e
        if row is None:
            return None
        return KeyRecord(user_id=row.user_id, public_key=row.public_key or "")


# --- Module Notes -----------------------------------------------------------
# Read-only: enrollment writes happen elsewhere, so there is no add/update here.
