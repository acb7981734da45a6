"""Protocolo do cliente de registro de comandos (CRUD remoto)."""

from __future__ import annotations

from typing import Any, Protocol


class CommandRegistryClientProtocol(Protocol):
    """Contrato mínimo para o registro remoto de comandos."""

    async def get_current_application(self) -> dict[str, Any]: ...

    async def list_commands(
        self,
        application_id: str,
        guild_id: str | None = None,
    ) -> list[dict[str, Any]]: ...

    async def bulk_overwrite_commands(
        self,
        application_id: str,
        commands: list[dict[str, Any]],
        guild_id: str | None = None,
    ) -> list[dict[str, Any]]: ...

    async def create_command(
        self,
        application_id: str,
        command: dict[str, Any],
        guild_id: str | None = None,
    ) -> dict[str, Any]: ...

    async def edit_command(
        self,
        application_id: str,
        command_id: str,
        command: dict[str, Any],
        guild_id: str | None = None,
    ) -> dict[str, Any]: ...

    async def delete_command(
        self,
        application_id: str,
        command_id: str,
        guild_id: str | None = None,
    ) -> None: ...
