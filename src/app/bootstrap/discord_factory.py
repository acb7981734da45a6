"""Factory de componentes do canal Discord (composition root).

Getters cacheados: a chave pública é decodificada uma única vez e o
dispatcher é compartilhado entre a rota HTTP e o canal push.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from api.connectors.discord.http_client import DiscordHttpClient, create_discord_http_client
from api.connectors.discord.signature import InteractionSignatureVerifier, InvalidPublicKeyError
from api.payload_builders.discord import CommandPayloadBuilder
from app.services.command_registry import CommandRegistryService
from app.services.interaction_dispatcher import InteractionDispatcher
from config.settings import get_discord_settings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_signature_verifier() -> InteractionSignatureVerifier | None:
    """Retorna verificador com a chave pública já decodificada.

    Returns:
        None se DISCORD_PUBLIC_KEY estiver ausente ou inválida (toda
        interação HTTP é rejeitada com 401).
    """
    public_key = get_discord_settings().public_key
    if not public_key:
        logger.warning("discord_public_key_missing", extra={"component": "bootstrap"})
        return None
    try:
        return InteractionSignatureVerifier(public_key)
    except InvalidPublicKeyError as exc:
        logger.error(
            "discord_public_key_invalid",
            extra={"component": "bootstrap", "error": str(exc)},
        )
        return None


@lru_cache(maxsize=1)
def get_discord_http_client() -> DiscordHttpClient:
    return create_discord_http_client(get_discord_settings())


@lru_cache(maxsize=1)
def get_interaction_dispatcher() -> InteractionDispatcher:
    """Dispatcher único do processo; a aplicação registra listeners nele."""
    settings = get_discord_settings()
    return InteractionDispatcher(
        deadline_budget_ms=settings.deadline_budget_ms,
        followup=get_discord_http_client(),
    )


@lru_cache(maxsize=1)
def get_command_registry() -> CommandRegistryService:
    return CommandRegistryService(
        client=get_discord_http_client(),
        builder=CommandPayloadBuilder(),
        application_id=get_discord_settings().application_id,
    )
