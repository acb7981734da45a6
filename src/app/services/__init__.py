"""Serviços de aplicação.

Unidades de orquestração sem IO direto; clientes concretos chegam por
protocolo (app/protocols/) via bootstrap.
"""

from app.services.acknowledgment import AcknowledgmentHandle, AcknowledgmentRace
from app.services.command_interaction import CommandInteraction, ReplyDelivery
from app.services.command_registry import CommandRegistryService
from app.services.interaction_dispatcher import InteractionDispatcher

__all__ = [
    "AcknowledgmentHandle",
    "AcknowledgmentRace",
    "CommandInteraction",
    "CommandRegistryService",
    "InteractionDispatcher",
    "ReplyDelivery",
]
