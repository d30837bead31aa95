"""
sigauth.services.errors

Error taxonomy for the signature authentication flow.

Responsibilities:
- Define the wire-level error codes surfaced to callers.
- Define the failure types raised by collaborator implementations.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class ErrorCode(enum.StrEnum):
    # Values are part of the wire contract; treat as stable.
    invalid_argument = "invalid-argument"
    not_found = "not-found"
    unauthenticated = "unauthenticated"
    internal = "internal"


@dataclass(frozen=True, slots=True)
class AuthError:
    code: ErrorCode
    message: str

    @classmethod
    def invalid_argument(cls, message: str = "Invalid request") -> AuthError:
        return cls(ErrorCode.invalid_argument, message)

    @classmethod
    def not_found(cls) -> AuthError:
        return cls(ErrorCode.not_found, "Public key not found")

    @classmethod
    def unauthenticated(cls) -> AuthError:
        return cls(ErrorCode.unauthenticated, "Invalid signature")

    @classmethod
    def internal(cls) -> AuthError:
        return cls(ErrorCode.internal, "Internal error")


class CollaboratorError(Exception):
    """
    Infrastructure failure in an external collaborator (network, unavailable dependency).
    """


class KeyRegistryError(CollaboratorError):
    pass


class TokenIssuerError(CollaboratorError):
    pass


# --- Module Notes -----------------------------------------------------------
# Collaborator errors are raised by implementations and converted to
# `ErrorCode.internal` results by `SignatureAuthHandler`.
