"""Interação de comando entregue aos listeners da aplicação."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from app.domain.interaction import build_message_data

if TYPE_CHECKING:
    from app.domain.interaction import CommandData, InteractionPayload
    from app.protocols.interaction_callback import InteractionFollowupProtocol
    from app.services.acknowledgment import AcknowledgmentHandle

logger = logging.getLogger(__name__)


class ReplyDelivery(StrEnum):
    """Por onde o conteúdo de um reply foi entregue."""

    INLINE = "inline"
    FOLLOWUP = "followup"


class FollowupUnavailableError(RuntimeError):
    """Reply tardio sem cliente de follow-up configurado."""


class CommandInteraction:
    """Invocação de comando + capacidade de resposta.

    Uso em um listener:

        @dispatcher.on_interaction
        async def on_command(interaction: CommandInteraction) -> None:
            if interaction.command_name == "ping":
                await interaction.reply("pong")
                return
            interaction.acknowledge()
            result = await slow_work()
            await interaction.reply({"content": result})

    `reply` tenta primeiro a resposta síncrona; se o prazo já expirou (ou
    a interação já foi reconhecida), edita a resposta original pelo canal
    de follow-up.
    """

    def __init__(
        self,
        payload: InteractionPayload,
        handle: AcknowledgmentHandle,
        followup: InteractionFollowupProtocol | None = None,
    ) -> None:
        self.payload = payload
        self.handle = handle
        self._followup = followup

    @property
    def id(self) -> str:
        return self.payload.id

    @property
    def token(self) -> str:
        return self.payload.token

    @property
    def guild_id(self) -> str | None:
        return self.payload.guild_id

    @property
    def channel_id(self) -> str | None:
        return self.payload.channel_id

    @property
    def member(self) -> Mapping[str, Any]:
        return self.payload.member

    @property
    def command(self) -> CommandData | None:
        return self.payload.data

    @property
    def command_name(self) -> str:
        return self.payload.data.name if self.payload.data else ""

    def option(self, name: str, default: Any = None) -> Any:
        if self.payload.data is None:
            return default
        return self.payload.data.option(name, default)

    def acknowledge(self, silent: bool = False) -> bool:
        """Reconhece a interação; o conteúdo chega depois via `reply`."""
        return self.handle.acknowledge(silent)

    async def reply(
        self,
        content: str | Mapping[str, Any],
        silent: bool = False,
    ) -> ReplyDelivery:
        """Entrega o conteúdo, na resposta síncrona ou por follow-up.

        Raises:
            FollowupUnavailableError: Se a resposta síncrona não estava
                mais disponível e não há cliente de follow-up.
            HttpError: Se o follow-up falhar.
        """
        if self.handle.reply(content, silent):
            return ReplyDelivery.INLINE

        if self._followup is None:
            raise FollowupUnavailableError("followup_client_not_configured")

        await self._followup.edit_original_response(
            self.payload.application_id,
            self.payload.token,
            build_message_data(content),
        )
        logger.info(
            "interaction_reply_followup_sent",
            extra={"correlation_id": self.payload.id, "expired": self.handle.expired},
        )
        return ReplyDelivery.FOLLOWUP
