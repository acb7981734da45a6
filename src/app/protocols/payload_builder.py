"""Protocolo de construção do payload de registro de comandos."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.command import CommandDescriptor


class CommandPayloadBuilderProtocol(Protocol):
    """Contrato mínimo para transformar descritores em JSON da API."""

    def build(self, command: CommandDescriptor) -> dict[str, Any]: ...

    def build_patch(self, command: CommandDescriptor) -> dict[str, Any]: ...
