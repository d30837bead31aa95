"""
tests.conftest

Shared fixtures: key pairs, signing helper, and a booted app over a temporary SQLite registry.
"""

from __future__ import annotations

import base64
from collections.abc import AsyncIterator, Callable

import httpx
import pytest
import pytest_asyncio
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec, padding, rsa
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat
from fastapi import FastAPI

from sigauth.api.app import create_app
from sigauth.db.models import UserKey
from sigauth.settings import Settings


def _public_pem(private_key) -> str:
    return (
        private_key.public_key()
        .public_bytes(Encoding.PEM, PublicFormat.SubjectPublicKeyInfo)
        .decode("ascii")
    )


@pytest.fixture
def public_pem() -> Callable[..., str]:
    return _public_pem


@pytest.fixture(scope="session")
def rsa_key() -> rsa.RSAPrivateKey:
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def other_rsa_key() -> rsa.RSAPrivateKey:
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def ec_key() -> ec.EllipticCurvePrivateKey:
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture
def sign() -> Callable[..., str]:
    def _sign(private_key, challenge: str) -> str:
        data = challenge.encode("utf-8")
        if isinstance(private_key, rsa.RSAPrivateKey):
            raw = private_key.sign(data, padding.PKCS1v15(), hashes.SHA256())
        else:
            raw = private_key.sign(data, ec.ECDSA(hashes.SHA256()))
        return base64.b64encode(raw).decode("ascii")

    return _sign


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        env="test",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'keys.db'}",
        token_secret="test-secret-with-enough-length-for-hs256",
    )


@pytest_asyncio.fixture
async def app(settings: Settings) -> AsyncIterator[FastAPI]:
    app = create_app(settings=settings)
    # httpx ASGITransport does not run lifespan; drive it explicitly.
    async with app.router.lifespan_context(app):
        yield app


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def enroll(app: FastAPI) -> Callable:
    async def _enroll(user_id: str, public_key: str | None) -> None:
        async with app.state.services.sessionmaker() as session:
            session.add(UserKey(user_id=user_id, public_key=public_key))
            await session.commit()

    return _enroll
