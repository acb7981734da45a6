"""Modelos de comandos de aplicação (slash commands).

CommandDescriptor descreve o que a aplicação quer registrar;
ApplicationCommand é o comando já registrado, como devolvido pela API.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class ApplicationCommandOptionType(IntEnum):
    """Tipos de opção de comando (valores de wire)."""

    SUB_COMMAND = 1
    SUB_COMMAND_GROUP = 2
    STRING = 3
    INTEGER = 4
    BOOLEAN = 5
    USER = 6
    CHANNEL = 7
    ROLE = 8

    @classmethod
    def parse(cls, value: str | int | ApplicationCommandOptionType) -> ApplicationCommandOptionType:
        """Aceita nome ("STRING"), valor (3) ou o próprio enum.

        Raises:
            ValueError: Se o tipo não existir.
        """
        if isinstance(value, str):
            try:
                return cls[value.upper()]
            except KeyError as exc:
                raise ValueError(f"unknown_option_type: {value}") from exc
        return cls(value)


@dataclass(frozen=True)
class CommandChoice:
    name: str
    value: str | int


@dataclass(frozen=True)
class CommandOptionDescriptor:
    """Opção de um comando; subcomandos carregam opções aninhadas."""

    type: str | int | ApplicationCommandOptionType
    name: str
    description: str
    default: bool | None = None
    required: bool | None = None
    choices: tuple[CommandChoice, ...] | None = None
    options: tuple[CommandOptionDescriptor, ...] | None = None


@dataclass(frozen=True)
class CommandDescriptor:
    """Comando a ser registrado."""

    name: str
    description: str
    options: tuple[CommandOptionDescriptor, ...] | None = None


@dataclass(frozen=True)
class ApplicationCommand:
    """Comando registrado na plataforma."""

    id: str
    application_id: str
    name: str
    description: str
    options: tuple[Mapping[str, Any], ...] = ()
    guild_id: str | None = None

    @classmethod
    def from_api(
        cls,
        data: Mapping[str, Any],
        guild_id: str | None = None,
    ) -> ApplicationCommand:
        return cls(
            id=str(data.get("id", "")),
            application_id=str(data.get("application_id", "")),
            name=str(data.get("name", "")),
            description=str(data.get("description", "")),
            options=tuple(data.get("options") or ()),
            guild_id=guild_id,
        )

    @property
    def is_global(self) -> bool:
        return self.guild_id is None
