"""Interações recebidas pelo canal push (gateway).

O canal já é autenticado (sem verificação de assinatura) e não tem slot de
resposta síncrona: o envelope, seja ack adiado ou reply completo, sempre
segue pelo endpoint de callback endereçado por (id, token).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.domain.interaction import InteractionPayload
from app.observability import correlation_scope

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.domain.interaction import ResponseEnvelope
    from app.protocols.interaction_callback import InteractionCallbackProtocol
    from app.services.interaction_dispatcher import InteractionDispatcher

logger = logging.getLogger(__name__)


async def handle_gateway_interaction(
    data: Mapping[str, Any],
    dispatcher: InteractionDispatcher,
    callback_client: InteractionCallbackProtocol,
) -> ResponseEnvelope:
    """Despacha a interação e entrega o envelope via callback.

    Args:
        data: Payload da interação (já parseado pelo gateway)
        dispatcher: Roteador compartilhado com a rota HTTP
        callback_client: Cliente do endpoint de callback

    Raises:
        InvalidInteractionKindError: Tipo desconhecido (não reenviar)
        HttpError: Falha ao entregar o callback

    Returns:
        Envelope entregue
    """
    payload = InteractionPayload.from_dict(data)

    with correlation_scope(payload.id or None):
        envelope = await dispatcher.resolve(payload)
        await callback_client.send_interaction_response(
            payload.id,
            payload.token,
            envelope.to_dict(),
        )
        logger.info(
            "gateway_interaction_delivered",
            extra={"response_type": envelope.type.name},
        )
    return envelope
