"""
tests.test_crypto

Signature verification against PEM public keys.
"""

from __future__ import annotations

import base64

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ed25519, padding

from sigauth.auth.crypto import verify_signature


def test_rsa_signature_verifies(rsa_key, sign, public_pem) -> None:
    sig = sign(rsa_key, "nonce-abc")
    assert verify_signature(public_key_pem=public_pem(rsa_key), challenge="nonce-abc", signature_b64=sig)


def test_ec_signature_verifies(ec_key, sign, public_pem) -> None:
    sig = sign(ec_key, "nonce-abc")
    assert verify_signature(public_key_pem=public_pem(ec_key), challenge="nonce-abc", signature_b64=sig)


def test_bytes_challenge_is_accepted(rsa_key, sign, public_pem) -> None:
    sig = sign(rsa_key, "nonce-abc")
    assert verify_signature(public_key_pem=public_pem(rsa_key), challenge=b"nonce-abc", signature_b64=sig)


def test_signature_over_different_challenge_is_rejected(rsa_key, sign, public_pem) -> None:
    sig = sign(rsa_key, "nonce-other")
    assert not verify_signature(
        public_key_pem=public_pem(rsa_key), challenge="nonce-abc", signature_b64=sig
    )


def test_signature_from_other_keypair_is_rejected(rsa_key, other_rsa_key, sign, public_pem) -> None:
    sig = sign(other_rsa_key, "nonce-abc")
    assert not verify_signature(
        public_key_pem=public_pem(rsa_key), challenge="nonce-abc", signature_b64=sig
    )


def test_ec_signature_against_rsa_key_is_rejected(rsa_key, ec_key, sign, public_pem) -> None:
    sig = sign(ec_key, "nonce-abc")
    assert not verify_signature(
        public_key_pem=public_pem(rsa_key), challenge="nonce-abc", signature_b64=sig
    )


def test_malformed_base64_is_rejected(rsa_key, public_pem) -> None:
    assert not verify_signature(
        public_key_pem=public_pem(rsa_key), challenge="nonce-abc", signature_b64="@@not base64@@"
    )


def test_non_signature_payload_is_rejected(rsa_key, ec_key, public_pem) -> None:
    bogus = base64.b64encode(b"not-a-real-signature").decode()
    for key in (rsa_key, ec_key):
        assert not verify_signature(
            public_key_pem=public_pem(key), challenge="nonce-abc", signature_b64=bogus
        )


def test_truncated_signature_is_rejected(rsa_key, ec_key, sign, public_pem) -> None:
    for key in (rsa_key, ec_key):
        raw = base64.b64decode(sign(key, "nonce-abc"))
        truncated = base64.b64encode(raw[:-8]).decode()
        assert not verify_signature(
            public_key_pem=public_pem(key), challenge="nonce-abc", signature_b64=truncated
        )


def test_empty_signature_is_rejected(rsa_key, public_pem) -> None:
    assert not verify_signature(public_key_pem=public_pem(rsa_key), challenge="x", signature_b64="")


def test_garbage_public_key_is_rejected(rsa_key, sign, public_pem) -> None:
    sig = sign(rsa_key, "nonce-abc")
    assert not verify_signature(
        public_key_pem="-----BEGIN PUBLIC KEY-----\nAAAA\n-----END PUBLIC KEY-----\n",
        challenge="nonce-abc",
        signature_b64=sig,
    )


def test_unsupported_key_type_is_rejected(public_pem) -> None:
    key = ed25519.Ed25519PrivateKey.generate()
    sig = base64.b64encode(key.sign(b"nonce-abc")).decode()
    assert not verify_signature(public_key_pem=public_pem(key), challenge="nonce-abc", signature_b64=sig)


def test_line_wrapped_base64_signature_verifies(rsa_key, public_pem) -> None:
    raw = rsa_key.sign(b"nonce-abc", padding.PKCS1v15(), hashes.SHA256())
    wrapped = base64.encodebytes(raw).decode("ascii")
    assert "\n" in wrapped
    assert verify_signature(
        public_key_pem=public_pem(rsa_key), challenge="nonce-abc", signature_b64=wrapped
    )


def test_non_alphabet_characters_inside_wrapped_base64_are_rejected(rsa_key, sign, public_pem) -> None:
    sig = sign(rsa_key, "nonce-abc")
    tampered = sig[:20] + "\n*" + sig[20:]
    assert not verify_signature(
        public_key_pem=public_pem(rsa_key), challenge="nonce-abc", signature_b64=tampered
    )
