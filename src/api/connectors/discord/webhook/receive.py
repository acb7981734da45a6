"""Verificação e parse de interações entregues por HTTP (sem PII).

A assinatura é verificada antes de qualquer parse do corpo.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from ..signature import verify_interaction_signature

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ..signature import InteractionSignatureVerifier


class InteractionRequestError(ValueError):
    """Erro base para falhas de entrega HTTP."""


class InvalidSignatureError(InteractionRequestError):
    """Assinatura ausente ou inválida (responde 401)."""


class InvalidJsonError(InteractionRequestError):
    """JSON inválido no corpo da interação."""


def parse_interaction_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    verifier: InteractionSignatureVerifier | None,
) -> dict[str, object]:
    """Valida assinatura e parseia o JSON da interação.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos
        verifier: Verificador Ed25519 configurado

    Raises:
        InvalidSignatureError: Se a verificação falhar (corpo não é lido)
        InvalidJsonError: Se o JSON for inválido ou não for objeto

    Returns:
        Payload da interação
    """
    signature_result = verify_interaction_signature(raw_body, headers, verifier)
    if not signature_result.valid:
        raise InvalidSignatureError(signature_result.error or "invalid_signature")

    try:
        payload = json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc

    if not isinstance(payload, dict):
        raise InvalidJsonError("payload_not_object")

    return payload
