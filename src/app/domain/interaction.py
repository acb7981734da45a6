"""Modelos de domínio de interações Discord.

Uma interação é um evento inbound: probe de liveness (PING) ou invocação de
comando (APPLICATION_COMMAND). Para cada interação é produzido exatamente um
ResponseEnvelope, o valor que vai para o fio.

Valores de wire (API v8):
    InteractionType: PING=1, APPLICATION_COMMAND=2
    InteractionResponseType:
        PONG=1
        ACKNOWLEDGE=2                   (ack adiado silencioso)
        CHANNEL_MESSAGE=3               (reply silencioso)
        CHANNEL_MESSAGE_WITH_SOURCE=4   (reply)
        ACKNOWLEDGE_WITH_SOURCE=5       (ack adiado, padrão do timeout)
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import IntEnum
from types import MappingProxyType
from typing import Any


class InteractionType(IntEnum):
    """Tipos de interação inbound."""

    PING = 1
    APPLICATION_COMMAND = 2


class InteractionResponseType(IntEnum):
    """Tipos de resposta de interação."""

    PONG = 1
    ACKNOWLEDGE = 2
    CHANNEL_MESSAGE = 3
    CHANNEL_MESSAGE_WITH_SOURCE = 4
    ACKNOWLEDGE_WITH_SOURCE = 5


class InvalidInteractionKindError(ValueError):
    """Tipo de interação desconhecido.

    Fatal e não-retentável para a interação em questão.
    """

    def __init__(self, kind: object) -> None:
        super().__init__(f"invalid_interaction_kind: {kind!r}")
        self.kind = kind


_EMPTY: Mapping[str, Any] = MappingProxyType({})


def _freeze(value: Any) -> Mapping[str, Any]:
    if isinstance(value, Mapping):
        return MappingProxyType(dict(value))
    return _EMPTY


@dataclass(frozen=True, slots=True)
class CommandOptionValue:
    """Valor resolvido de uma opção (ou subcomando) invocada."""

    name: str
    value: Any = None
    options: tuple[CommandOptionValue, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CommandOptionValue:
        return cls(
            name=str(data.get("name", "")),
            value=data.get("value"),
            options=tuple(cls.from_dict(o) for o in data.get("options") or ()),
        )


@dataclass(frozen=True, slots=True)
class CommandData:
    """Dados do comando invocado (nome e opções resolvidas)."""

    id: str
    name: str
    options: tuple[CommandOptionValue, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CommandData:
        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name", "")),
            options=tuple(
                CommandOptionValue.from_dict(o) for o in data.get("options") or ()
            ),
        )

    def option(self, name: str, default: Any = None) -> Any:
        """Retorna o valor de uma opção de primeiro nível pelo nome."""
        for opt in self.options:
            if opt.name == name:
                return opt.value
        return default


@dataclass(frozen=True, slots=True)
class InteractionPayload:
    """Evento inbound imutável.

    Attributes:
        kind: Tipo da interação; int cru quando o tipo é desconhecido
        id: ID da interação
        token: Token de entrega (rota a resposta out-of-band)
        application_id: ID da aplicação dona do comando
        guild_id: Servidor de origem (None em DM)
        channel_id: Canal de origem
        member: Membro/usuário que invocou
        data: Dados do comando (apenas APPLICATION_COMMAND)
    """

    kind: InteractionType | int
    id: str
    token: str
    application_id: str = ""
    guild_id: str | None = None
    channel_id: str | None = None
    member: Mapping[str, Any] = field(default_factory=lambda: _EMPTY)
    data: CommandData | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> InteractionPayload:
        """Constrói payload a partir do JSON recebido."""
        raw_kind = data.get("type")
        try:
            kind: InteractionType | int = InteractionType(raw_kind)
        except ValueError:
            kind = raw_kind  # type: ignore[assignment]

        command = data.get("data")
        return cls(
            kind=kind,
            id=str(data.get("id", "")),
            token=str(data.get("token", "")),
            application_id=str(data.get("application_id", "")),
            guild_id=data.get("guild_id"),
            channel_id=data.get("channel_id"),
            member=_freeze(data.get("member") or data.get("user")),
            data=(
                CommandData.from_dict(command)
                if kind == InteractionType.APPLICATION_COMMAND and isinstance(command, Mapping)
                else None
            ),
        )


def build_message_data(content: str | Mapping[str, Any]) -> dict[str, Any]:
    """Normaliza conteúdo de reply para o corpo da mensagem.

    Strings viram {"content": ...}; mappings são copiados como estão.
    """
    if isinstance(content, str):
        return {"content": content}
    return dict(content)


@dataclass(frozen=True, slots=True)
class ResponseEnvelope:
    """Resposta única enviada para uma interação."""

    type: InteractionResponseType
    data: Mapping[str, Any] | None = None

    @classmethod
    def pong(cls) -> ResponseEnvelope:
        return cls(InteractionResponseType.PONG)

    @classmethod
    def deferred(cls, *, silent: bool = False) -> ResponseEnvelope:
        """Ack adiado; o conteúdo real chega depois por outro canal."""
        return cls(
            InteractionResponseType.ACKNOWLEDGE
            if silent
            else InteractionResponseType.ACKNOWLEDGE_WITH_SOURCE
        )

    @classmethod
    def reply(
        cls,
        content: str | Mapping[str, Any],
        *,
        silent: bool = False,
    ) -> ResponseEnvelope:
        return cls(
            InteractionResponseType.CHANNEL_MESSAGE
            if silent
            else InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE,
            build_message_data(content),
        )

    @property
    def is_deferred(self) -> bool:
        return self.type in (
            InteractionResponseType.ACKNOWLEDGE,
            InteractionResponseType.ACKNOWLEDGE_WITH_SOURCE,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serializa para o formato JSON da API."""
        payload: dict[str, Any] = {"type": int(self.type)}
        if self.data is not None:
            payload["data"] = dict(self.data)
        return payload
