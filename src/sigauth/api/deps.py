"""
sigauth.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Expose the process-wide `AuthServices` built by the composition root.
- Provide request-scoped DB sessions and a ready-to-use `SignatureAuthHandler`.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from dataclasses import dataclass

import httpx
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from sigauth.db.repositories.keys import KeyRepo
from sigauth.services.ports import TokenIssuer
from sigauth.services.signature_auth import SignatureAuthHandler


@dataclass(slots=True)
class AuthServices:
    """
    Collaborator handles created once at startup and shared by all requests.
    """

    engine: AsyncEngine
    sessionmaker: async_sessionmaker[AsyncSession]
    token_issuer: TokenIssuer
    # Only set when the token issuer is remote.
    http: httpx.AsyncClient | None = None


def auth_services(request: Request) -> AuthServices:
    # Populated by the lifespan handler in `sigauth.api.app.create_app`.
    return request.app.state.services  # type: ignore[attr-defined]


async def db_session(
    services: AuthServices = Depends(auth_services),
) -> AsyncIterator[AsyncSession]:
    async with services.sessionmaker() as session:
        yield session


def signature_auth_handler(
    services: AuthServices = Depends(auth_services),
    session: AsyncSession = Depends(db_session),
) -> SignatureAuthHandler:
    return SignatureAuthHandler(registry=KeyRepo(session), issuer=services.token_issuer)
