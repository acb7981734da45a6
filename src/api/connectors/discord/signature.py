"""Verificação de assinatura Ed25519 de interações HTTP.

A plataforma assina `timestamp || corpo` com Ed25519 e envia:
- x-signature-ed25519: assinatura em hex (64 bytes)
- x-signature-timestamp: timestamp usado na assinatura

A mensagem verificada é exatamente `timestamp.encode() + raw_body`, sem
normalização nem re-serialização do corpo.
"""

from __future__ import annotations

import binascii
from dataclasses import dataclass
from typing import TYPE_CHECKING

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

if TYPE_CHECKING:
    from collections.abc import Mapping

SIGNATURE_HEADER = "x-signature-ed25519"
TIMESTAMP_HEADER = "x-signature-timestamp"

ED25519_SIGNATURE_SIZE = 64
ED25519_PUBLIC_KEY_SIZE = 32


class InvalidPublicKeyError(ValueError):
    """Chave pública configurada não é Ed25519 válida em hex."""


@dataclass(frozen=True)
class SignatureResult:
    """Resultado da verificação de assinatura."""

    valid: bool
    error: str | None = None


class InteractionSignatureVerifier:
    """Verificador com a chave pública decodificada uma única vez.

    Instâncias são imutáveis e podem ser compartilhadas entre interações
    concorrentes.

    Raises:
        InvalidPublicKeyError: Se a chave não for hex de 32 bytes.
    """

    def __init__(self, public_key_hex: str) -> None:
        try:
            raw_key = bytes.fromhex(public_key_hex)
        except (ValueError, TypeError) as exc:
            raise InvalidPublicKeyError("public_key_not_hex") from exc
        if len(raw_key) != ED25519_PUBLIC_KEY_SIZE:
            raise InvalidPublicKeyError("public_key_wrong_length")
        try:
            self._public_key = Ed25519PublicKey.from_public_bytes(raw_key)
        except ValueError as exc:
            raise InvalidPublicKeyError("public_key_invalid") from exc

    def verify(self, timestamp: str, raw_body: bytes, signature_hex: str) -> bool:
        """Verifica a assinatura de uma entrega.

        Args:
            timestamp: Valor do header x-signature-timestamp
            raw_body: Corpo bruto do request
            signature_hex: Valor do header x-signature-ed25519

        Returns:
            True apenas se a assinatura for válida para esta chave.
        """
        try:
            signature = binascii.unhexlify(signature_hex)
        except (binascii.Error, ValueError, TypeError):
            return False
        if len(signature) != ED25519_SIGNATURE_SIZE:
            return False

        try:
            self._public_key.verify(signature, timestamp.encode("utf-8") + raw_body)
        except InvalidSignature:
            return False
        return True


def verify_interaction_signature(
    raw_body: bytes,
    headers: Mapping[str, str],
    verifier: InteractionSignatureVerifier | None,
) -> SignatureResult:
    """Valida os headers de assinatura de uma entrega HTTP.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos (chaves em minúsculas)
        verifier: Verificador configurado; None rejeita sempre

    Returns:
        SignatureResult com motivo da falha (sem dados sensíveis)
    """
    if verifier is None:
        return SignatureResult(valid=False, error="public_key_not_configured")

    signature = headers.get(SIGNATURE_HEADER)
    timestamp = headers.get(TIMESTAMP_HEADER)
    if not signature or timestamp is None:
        return SignatureResult(valid=False, error="missing_signature_headers")

    if not verifier.verify(timestamp, raw_body, signature):
        return SignatureResult(valid=False, error="invalid_signature")

    return SignatureResult(valid=True)
