"""Testes da verificação Ed25519 de interações."""

from __future__ import annotations

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from api.connectors.discord.signature import (
    SIGNATURE_HEADER,
    TIMESTAMP_HEADER,
    InteractionSignatureVerifier,
    InvalidPublicKeyError,
    verify_interaction_signature,
)

TIMESTAMP = "1700000000"
BODY = b'{"type":1,"id":"1","token":"t"}'


def _flip(data: bytes, index: int) -> bytes:
    mutable = bytearray(data)
    mutable[index] ^= 0x01
    return bytes(mutable)


def test_valid_signature_passes(public_key_hex: str, sign) -> None:
    verifier = InteractionSignatureVerifier(public_key_hex)

    assert verifier.verify(TIMESTAMP, BODY, sign(TIMESTAMP, BODY)) is True


@pytest.mark.parametrize("index", [0, len(BODY) // 2, len(BODY) - 1])
def test_flipped_body_byte_is_rejected(public_key_hex: str, sign, index: int) -> None:
    verifier = InteractionSignatureVerifier(public_key_hex)
    signature = sign(TIMESTAMP, BODY)

    assert verifier.verify(TIMESTAMP, _flip(BODY, index), signature) is False


def test_changed_timestamp_is_rejected(public_key_hex: str, sign) -> None:
    verifier = InteractionSignatureVerifier(public_key_hex)
    signature = sign(TIMESTAMP, BODY)

    assert verifier.verify("1700000001", BODY, signature) is False


@pytest.mark.parametrize("index", [0, 31, 63])
def test_flipped_signature_byte_is_rejected(public_key_hex: str, sign, index: int) -> None:
    verifier = InteractionSignatureVerifier(public_key_hex)
    signature = bytes.fromhex(sign(TIMESTAMP, BODY))

    assert verifier.verify(TIMESTAMP, BODY, _flip(signature, index).hex()) is False


def test_wrong_public_key_is_rejected(sign) -> None:
    other = Ed25519PrivateKey.generate().public_key().public_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PublicFormat.Raw,
    )
    verifier = InteractionSignatureVerifier(other.hex())

    assert verifier.verify(TIMESTAMP, BODY, sign(TIMESTAMP, BODY)) is False


@pytest.mark.parametrize("signature", ["", "zz", "abcd", "00" * 63, "00" * 65, "ção"])
def test_malformed_signature_is_rejected(public_key_hex: str, signature: str) -> None:
    verifier = InteractionSignatureVerifier(public_key_hex)

    assert verifier.verify(TIMESTAMP, BODY, signature) is False


def test_body_is_not_normalized(public_key_hex: str, sign) -> None:
    verifier = InteractionSignatureVerifier(public_key_hex)
    signature = sign(TIMESTAMP, BODY)

    assert verifier.verify(TIMESTAMP, b'{"type": 1, "id": "1", "token": "t"}', signature) is False


@pytest.mark.parametrize("key", ["", "not-hex", "ab" * 31, "ab" * 33])
def test_invalid_public_key_raises(key: str) -> None:
    with pytest.raises(InvalidPublicKeyError):
        InteractionSignatureVerifier(key)


class TestVerifyInteractionSignature:
    """Helper que lê os headers da entrega."""

    def test_ok(self, public_key_hex: str, sign) -> None:
        headers = {SIGNATURE_HEADER: sign(TIMESTAMP, BODY), TIMESTAMP_HEADER: TIMESTAMP}

        result = verify_interaction_signature(BODY, headers, InteractionSignatureVerifier(public_key_hex))

        assert result.valid is True
        assert result.error is None

    def test_missing_headers(self, public_key_hex: str) -> None:
        result = verify_interaction_signature(BODY, {}, InteractionSignatureVerifier(public_key_hex))

        assert result.valid is False
        assert result.error == "missing_signature_headers"

    def test_without_verifier_always_rejects(self, sign) -> None:
        headers = {SIGNATURE_HEADER: sign(TIMESTAMP, BODY), TIMESTAMP_HEADER: TIMESTAMP}

        result = verify_interaction_signature(BODY, headers, None)

        assert result.valid is False
        assert result.error == "public_key_not_configured"

    def test_bad_signature(self, public_key_hex: str) -> None:
        headers = {SIGNATURE_HEADER: "00" * 64, TIMESTAMP_HEADER: TIMESTAMP}

        result = verify_interaction_signature(BODY, headers, InteractionSignatureVerifier(public_key_hex))

        assert result.error == "invalid_signature"
