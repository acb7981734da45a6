"""Protocolos de entrega de respostas de interação.

Evita dependência direta da camada api (cliente HTTP concreto).
"""

from __future__ import annotations

from typing import Any, Protocol


class InteractionCallbackProtocol(Protocol):
    """Envia o envelope de resposta pelo endpoint de callback."""

    async def send_interaction_response(
        self,
        interaction_id: str,
        interaction_token: str,
        envelope: dict[str, Any],
    ) -> None: ...


class InteractionFollowupProtocol(Protocol):
    """Entrega conteúdo depois da resposta inicial (canal out-of-band)."""

    async def edit_original_response(
        self,
        application_id: str,
        interaction_token: str,
        data: dict[str, Any],
    ) -> dict[str, Any]: ...
