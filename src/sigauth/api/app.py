"""
sigauth.api.app

FastAPI app factory for the signature authentication service.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Build the collaborator handles (key registry DB, token issuer) once per process.
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from sigauth import __version__
from sigauth.api.deps import AuthServices
from sigauth.api.routers.health import router as health_router
from sigauth.api.routers.verify import error_response
from sigauth.api.routers.verify import router as verify_router
from sigauth.db.init_db import init_db
from sigauth.db.session import create_engine, create_sessionmaker
from sigauth.observability.logging import configure_logging, get_logger
from sigauth.observability.middleware import RequestContextMiddleware
from sigauth.services.errors import AuthError
from sigauth.services.ports import TokenIssuer
from sigauth.settings import Settings
from sigauth.token_issuers.http import HttpTokenIssuer
from sigauth.token_issuers.local import JwtTokenIssuer

log = get_logger(__name__)


async def build_services(settings: Settings) -> AuthServices:
    engine = create_engine(settings)
    http: httpx.AsyncClient | None = None
    token_issuer: TokenIssuer
    try:
        if settings.env in ("dev", "test"):
            # Dev/test convenience: create the key table automatically.
            await init_db(engine)

        if settings.token_issuer_mode == "http":
            http = httpx.AsyncClient(
                base_url=settings.token_issuer_url,
                timeout=settings.token_issuer_timeout_seconds,
            )
            token_issuer = HttpTokenIssuer(http=http)
        else:
            token_issuer = JwtTokenIssuer.from_settings(settings)
    except BaseException:
        # Partial startup must not leak the pool.
        await engine.dispose()
        raise

    return AuthServices(
        engine=engine,
        sessionmaker=create_sessionmaker(engine),
        token_issuer=token_issuer,
        http=http,
    )


async def close_services(services: AuthServices) -> None:
    if services.http is not None:
        await services.http.aclose()
    # Dispose the engine to close pools/FDs gracefully.
    await services.engine.dispose()


def create_app(*, settings: Settings) -> FastAPI:
    # Configure structured logging once at process startup (before app serves requests).
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env, token_issuer_mode=settings.token_issuer_mode)
        app.state.services = await build_services(settings)
        try:
            yield
        finally:
            await close_services(app.state.services)
            log.info("shutdown")

    app = FastAPI(
        title="Signature Challenge Authentication",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(verify_router)

    @app.exception_handler(RequestValidationError)
    async def _invalid_request(_: Request, exc: RequestValidationError) -> JSONResponse:
        # Undecodable bodies use the same error envelope as handler-level validation.
        log.info("request_rejected", code="invalid-argument", errors=len(exc.errors()))
        return error_response(AuthError.invalid_argument("Malformed request body"))

    return app


# --- Module Notes -----------------------------------------------------------
# App composition stays here; verification logic stays in `services.signature_auth`.
