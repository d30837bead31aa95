"""
sigauth.db.models

Key registry persistence schema.

Responsibilities:
- Define the `UserKey` ORM model: one registered public key per user id.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from sigauth.db.base import Base


def _utcnow() -> datetime:
    # Persist naive UTC timestamps for simplicity; production systems may use tz-aware types.
    return datetime.utcnow()


class UserKey(Base):
    __tablename__ = "user_keys"

    # Primary key enforces a single public key per user.
    user_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    public_key: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)


# --- Module Notes -----------------------------------------------------------
# Rows are written by the enrollment flow, which is outside this service.
# `public_key` is nullable so half-enrolled rows read back as "not found".
