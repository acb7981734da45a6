"""Builder do payload de registro de comandos.

Transformação pura e recursiva: CommandDescriptor → JSON da API, com o
tipo de cada opção convertido de nome para o valor inteiro de wire.
Campos None são omitidos.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.domain.command import ApplicationCommandOptionType

if TYPE_CHECKING:
    from app.domain.command import CommandDescriptor, CommandOptionDescriptor


def build_command_payload(command: CommandDescriptor) -> dict[str, Any]:
    """Constrói payload de um comando.

    Raises:
        ValueError: Se alguma opção tiver tipo desconhecido.
    """
    payload: dict[str, Any] = {
        "name": command.name,
        "description": command.description,
    }
    if command.options is not None:
        payload["options"] = [build_option_payload(o) for o in command.options]
    return payload


def build_option_payload(option: CommandOptionDescriptor) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "type": int(ApplicationCommandOptionType.parse(option.type)),
        "name": option.name,
        "description": option.description,
    }
    if option.default is not None:
        payload["default"] = option.default
    if option.required is not None:
        payload["required"] = option.required
    if option.choices is not None:
        payload["choices"] = [{"name": c.name, "value": c.value} for c in option.choices]
    if option.options is not None:
        payload["options"] = [build_option_payload(o) for o in option.options]
    return payload


def build_command_patch_payload(command: CommandDescriptor) -> dict[str, Any]:
    """Payload de edição: o nome identifica o comando e não é enviado."""
    payload = build_command_payload(command)
    payload.pop("name", None)
    return payload


class CommandPayloadBuilder:
    """Implementação de CommandPayloadBuilderProtocol."""

    def build(self, command: CommandDescriptor) -> dict[str, Any]:
        return build_command_payload(command)

    def build_patch(self, command: CommandDescriptor) -> dict[str, Any]:
        return build_command_patch_payload(command)
