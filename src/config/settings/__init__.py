"""Agregador de settings do serviço de interações.

Re-exporta as settings de cada módulo. Organização por domínio para
isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    STRICT_ENVIRONMENTS,
    BaseSettings,
    Environment,
    get_base_settings,
)

# Channel-specific settings
from config.settings.discord import (
    DEFAULT_DEADLINE_BUDGET_MS,
    DISCORD_API_BASE_URL,
    DISCORD_API_VERSION,
    DiscordSettings,
    get_discord_settings,
)

__all__ = [
    # Constants
    "DEFAULT_DEADLINE_BUDGET_MS",
    "DISCORD_API_BASE_URL",
    "DISCORD_API_VERSION",
    "STRICT_ENVIRONMENTS",
    # Base
    "BaseSettings",
    # Channels
    "DiscordSettings",
    "Environment",
    "get_base_settings",
    "get_discord_settings",
]
