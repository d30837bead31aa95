"""
sigauth.db.init_db

DB initialization helpers (dev/test convenience).

Responsibilities:
- Create the key registry table for local development and tests.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from sigauth.db import models  # noqa: F401  # register models on Base.metadata
from sigauth.db.base import Base


async def init_db(engine: AsyncEngine) -> None:
    # Use a transactional DDL block when supported by the backend.
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
