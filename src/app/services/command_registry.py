"""Serviço de registro de comandos da aplicação.

Orquestra o CRUD remoto: resolve o application_id, transforma descritores
no payload da API e converte respostas em ApplicationCommand.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain.command import ApplicationCommand

if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.domain.command import CommandDescriptor
    from app.protocols.command_registry import CommandRegistryClientProtocol
    from app.protocols.payload_builder import CommandPayloadBuilderProtocol

logger = logging.getLogger(__name__)


class CommandRegistryService:
    """CRUD de comandos globais ou de um servidor (guild_id).

    Args:
        client: Cliente do registro remoto
        builder: Transformação descritor → payload
        application_id: ID configurado; vazio = resolvido via API na
            primeira chamada e mantido em cache
    """

    def __init__(
        self,
        client: CommandRegistryClientProtocol,
        builder: CommandPayloadBuilderProtocol,
        application_id: str = "",
    ) -> None:
        self._client = client
        self._builder = builder
        self._application_id = application_id

    async def get_application_id(self) -> str:
        if not self._application_id:
            application = await self._client.get_current_application()
            self._application_id = str(application["id"])
            logger.info("application_id_resolved", extra={"component": "command_registry"})
        return self._application_id

    async def list_commands(self, guild_id: str | None = None) -> list[ApplicationCommand]:
        application_id = await self.get_application_id()
        commands = await self._client.list_commands(application_id, guild_id)
        return [ApplicationCommand.from_api(c, guild_id) for c in commands or ()]

    async def set_commands(
        self,
        commands: Iterable[CommandDescriptor],
        guild_id: str | None = None,
    ) -> list[ApplicationCommand]:
        """Substitui todos os comandos do escopo pelos informados."""
        application_id = await self.get_application_id()
        payloads = [self._builder.build(c) for c in commands]
        registered = await self._client.bulk_overwrite_commands(application_id, payloads, guild_id)
        logger.info(
            "commands_replaced",
            extra={
                "component": "command_registry",
                "command_count": len(payloads),
                "scope": "guild" if guild_id else "global",
            },
        )
        return [ApplicationCommand.from_api(c, guild_id) for c in registered or ()]

    async def create_command(
        self,
        command: CommandDescriptor,
        guild_id: str | None = None,
    ) -> ApplicationCommand:
        application_id = await self.get_application_id()
        created = await self._client.create_command(
            application_id, self._builder.build(command), guild_id
        )
        return ApplicationCommand.from_api(created, guild_id)

    async def update_command(
        self,
        command_id: str,
        command: CommandDescriptor,
        guild_id: str | None = None,
    ) -> ApplicationCommand:
        application_id = await self.get_application_id()
        updated = await self._client.edit_command(
            application_id, command_id, self._builder.build_patch(command), guild_id
        )
        return ApplicationCommand.from_api(updated, guild_id)

    async def delete_command(self, command_id: str, guild_id: str | None = None) -> None:
        application_id = await self.get_application_id()
        await self._client.delete_command(application_id, command_id, guild_id)
        logger.info(
            "command_deleted",
            extra={"component": "command_registry", "scope": "guild" if guild_id else "global"},
        )
