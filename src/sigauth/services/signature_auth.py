"""
sigauth.services.signature_auth

Signature challenge authentication service.

Responsibilities:
- Validate the incoming request payload.
- Look up the caller's registered public key.
- Verify the challenge signature and mint a session credential on success.
- Report every outcome as a `VerifyResult` instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError

from sigauth.auth.crypto import verify_signature
from sigauth.auth.models import SessionCredential
from sigauth.observability.logging import get_logger
from sigauth.services.errors import AuthError, KeyRegistryError, TokenIssuerError
from sigauth.services.ports import KeyRegistry, TokenIssuer

log = get_logger(__name__)


class VerifyRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    user_id: StrictStr = Field(alias="userId", min_length=1, max_length=128)
    challenge: StrictStr = Field(min_length=1)
    signature: StrictStr = Field(min_length=1)


@dataclass(frozen=True, slots=True)
class VerifyResult:
    credential: SessionCredential | None = None
    error: AuthError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, credential: SessionCredential) -> VerifyResult:
        return cls(credential=credential)

    @classmethod
    def failure(cls, error: AuthError) -> VerifyResult:
        return cls(error=error)


def _describe_validation_error(e: ValidationError) -> str:
    first = e.errors()[0]
    field = ".".join(str(p) for p in first.get("loc", ())) or "request"
    return f"Invalid field '{field}': {first.get('msg', 'invalid value')}"


class SignatureAuthHandler:
    """
    Stateless per call: collaborators are injected, nothing is cached between calls.
    Challenges are not tracked, so a replayed (challenge, signature) pair mints a new credential.
    """

    def __init__(self, *, registry: KeyRegistry, issuer: TokenIssuer) -> None:
        self._registry = registry
        self._issuer = issuer

    def parse(self, payload: Any) -> VerifyRequest | AuthError:
        if not isinstance(payload, dict):
            return AuthError.invalid_argument("Request body must be an object")
        try:
            return VerifyRequest.model_validate(payload)
        except ValidationError as e:
            return AuthError.invalid_argument(_describe_validation_error(e))

    async def handle(self, payload: Any) -> VerifyResult:
        parsed = self.parse(payload)
        if isinstance(parsed, AuthError):
            log.info("request_rejected", code=str(parsed.code))
            return VerifyResult.failure(parsed)
        return await self.verify(parsed)

    async def verify(self, request: VerifyRequest) -> VerifyResult:
        user_id = request.user_id

        # 1) Registered key lookup.
        try:
            record = await self._registry.get(user_id)
        except KeyRegistryError:
            log.exception("collaborator_failed", collaborator="key_registry", user_id=user_id)
            return VerifyResult.failure(AuthError.internal())

        if record is None or not record.public_key:
            log.info("signature_rejected", user_id=user_id, code="not-found")
            return VerifyResult.failure(AuthError.not_found())

        # 2) Proof of possession.
        if not verify_signature(
            public_key_pem=record.public_key,
            challenge=request.challenge,
            signature_b64=request.signature,
        ):
            log.info("signature_rejected", user_id=user_id, code="unauthenticated")
            return VerifyResult.failure(AuthError.unauthenticated())

        # 3) Credential issuance; nothing has been written before this point.
        try:
            credential = await self._issuer.mint(user_id)
        except TokenIssuerError:
            log.exception("collaborator_failed", collaborator="token_issuer", user_id=user_id)
            return VerifyResult.failure(AuthError.internal())

        log.info("signature_verified", user_id=user_id)
        return VerifyResult.success(credential)


# --- Module Notes -----------------------------------------------------------
# The API layer maps `AuthError.code` to HTTP status codes (see `api.routers.verify`).
