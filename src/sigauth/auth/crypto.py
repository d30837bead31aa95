"""
sigauth.auth.crypto

Challenge signature verification.

Responsibilities:
- Load a PEM public key and verify a base64 signature over a challenge (SHA-256).
- Pick the signature scheme from the key type (RSA PKCS#1 v1.5, ECDSA).
- Collapse every decode/parse/verify failure into a plain `False`.
"""

from __future__ import annotations

import base64
import binascii

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec, padding, rsa
from cryptography.hazmat.primitives.serialization import load_pem_public_key


def decode_signature(signature_b64: str) -> bytes:
    # Line-wrapped (RFC 2045) input is accepted; characters outside the alphabet are not.
    compact = "".join(signature_b64.split())
    return base64.b64decode(compact, validate=True)


def verify_signature(*, public_key_pem: str, challenge: str | bytes, signature_b64: str) -> bool:
    message = challenge.encode("utf-8") if isinstance(challenge, str) else challenge

    try:
        signature = decode_signature(signature_b64)
        public_key = load_pem_public_key(public_key_pem.encode("utf-8"))
    except (ValueError, binascii.Error, UnsupportedAlgorithm):
        return False

    if not signature:
        return False

    try:
        if isinstance(public_key, rsa.RSAPublicKey):
            public_key.verify(signature, message, padding.PKCS1v15(), hashes.SHA256())
        elif isinstance(public_key, ec.EllipticCurvePublicKey):
            public_key.verify(signature, message, ec.ECDSA(hashes.SHA256()))
        else:
            # Ed25519/Ed448/DSA keys have no SHA-256 digest-then-sign scheme here.
            return False
    except (InvalidSignature, ValueError):
        return False
    return True


# --- Module Notes -----------------------------------------------------------
# Callers only learn valid/invalid; the reason for a rejection is never surfaced.
