"""Protocolos e contratos do core da aplicação."""

from .command_registry import CommandRegistryClientProtocol
from .interaction_callback import InteractionCallbackProtocol, InteractionFollowupProtocol
from .payload_builder import CommandPayloadBuilderProtocol

__all__ = [
    "CommandPayloadBuilderProtocol",
    "CommandRegistryClientProtocol",
    "InteractionCallbackProtocol",
    "InteractionFollowupProtocol",
]
