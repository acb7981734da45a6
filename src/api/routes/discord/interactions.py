"""Endpoint de interações do Discord (webhook HTTP).

Endpoints:
- POST /interactions: recebimento de interações assinadas

Fluxo:
1. Lê headers de assinatura e o corpo bruto completo
2. Verifica Ed25519 sobre `timestamp || corpo` (falha → 401 sem corpo)
3. Parseia JSON e despacha (PING → PONG; comando → corrida de ack)
4. Responde 200 com o envelope JSON

Segurança:
- Nenhum byte do corpo é parseado antes da assinatura ser validada
- A resposta nunca passa do prazo de acknowledgment configurado
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from api.connectors.discord.webhook.receive import (
    InvalidJsonError,
    InvalidSignatureError,
    parse_interaction_request,
)
from app.bootstrap.discord_factory import get_interaction_dispatcher, get_signature_verifier
from app.domain.interaction import InvalidInteractionKindError
from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/interactions", response_model=None)
async def receive_interaction(request: Request) -> Response:
    """Recebe uma interação HTTP e responde com o envelope.

    Returns:
        200 com envelope JSON, 401 (assinatura) ou 400 (payload inválido).
    """
    token = set_correlation_id(request.headers.get("x-correlation-id"))

    try:
        raw_body = await request.body()

        try:
            payload = parse_interaction_request(
                raw_body=raw_body,
                headers=request.headers,
                verifier=get_signature_verifier(),
            )
        except InvalidSignatureError as exc:
            logger.warning(
                "interaction_signature_invalid",
                extra={"channel": "discord", "error": str(exc)},
            )
            return Response(status_code=status.HTTP_401_UNAUTHORIZED)
        except InvalidJsonError as exc:
            logger.warning(
                "interaction_json_invalid",
                extra={"channel": "discord", "error": str(exc)},
            )
            return Response(status_code=status.HTTP_400_BAD_REQUEST)

        logger.info(
            "interaction_received",
            extra={
                "channel": "discord",
                "interaction_type": payload.get("type"),
                "payload_size": len(raw_body),
            },
        )

        try:
            envelope = await get_interaction_dispatcher().resolve(payload)
        except InvalidInteractionKindError as exc:
            logger.warning(
                "interaction_rejected",
                extra={"channel": "discord", "error": str(exc)},
            )
            return Response(status_code=status.HTTP_400_BAD_REQUEST)

        logger.info(
            "interaction_responded",
            extra={
                "channel": "discord",
                "correlation_id": get_correlation_id(),
                "response_type": envelope.type.name,
            },
        )
        return JSONResponse(content=envelope.to_dict(), status_code=status.HTTP_200_OK)

    finally:
        reset_correlation_id(token)
