"""Settings específicas de Discord.

Configurações do canal Discord: verificação de interações (Ed25519),
prazo de acknowledgment e acesso à API REST (callbacks e registro de
comandos).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes da Discord API
DISCORD_API_VERSION: str = "v8"
DISCORD_API_BASE_URL: str = "https://discord.com/api"

# Prazo da plataforma para a resposta inicial de uma interação
DEFAULT_DEADLINE_BUDGET_MS: int = 250

# Chave pública Ed25519 em hex (32 bytes)
PUBLIC_KEY_HEX_LENGTH: int = 64


@dataclass(frozen=True)
class DiscordSettings:
    """Configurações do canal Discord.

    Attributes:
        public_key: Chave pública (hex) para verificação de interações
        bot_token: Token do bot Discord
        application_id: ID da aplicação (vazio = resolvido via API)
        deadline_budget_ms: Prazo para resposta inicial de comandos
        api_version: Versão da API
        api_base_url: URL base da API
        request_timeout_seconds: Timeout para requisições HTTP
        max_retries: Máximo de tentativas em caso de erro transitório
    """

    # Credenciais
    public_key: str = ""
    bot_token: str = ""
    application_id: str = ""

    # Protocolo de acknowledgment
    deadline_budget_ms: int = DEFAULT_DEADLINE_BUDGET_MS

    # API
    api_version: str = DISCORD_API_VERSION
    api_base_url: str = DISCORD_API_BASE_URL

    # Timeouts e retries
    request_timeout_seconds: float = 30.0
    max_retries: int = 3

    @property
    def api_endpoint(self) -> str:
        """URL base completa da API com versão."""
        return f"{self.api_base_url}/{self.api_version}"

    @property
    def deadline_budget_seconds(self) -> float:
        """Prazo de acknowledgment em segundos (para o event loop)."""
        return self.deadline_budget_ms / 1000

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Discord.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.public_key:
            errors.append("DISCORD_PUBLIC_KEY não configurado")
        elif len(self.public_key) != PUBLIC_KEY_HEX_LENGTH:
            errors.append(
                f"DISCORD_PUBLIC_KEY deve ter {PUBLIC_KEY_HEX_LENGTH} caracteres hex"
            )

        if not self.bot_token:
            errors.append("DISCORD_BOT_TOKEN não configurado")

        if self.deadline_budget_ms <= 0:
            errors.append("DISCORD_DEADLINE_BUDGET_MS deve ser > 0")

        if self.request_timeout_seconds <= 0:
            errors.append("DISCORD_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.max_retries < 0:
            errors.append("DISCORD_MAX_RETRIES deve ser >= 0")

        return errors


def _load_from_env() -> DiscordSettings:
    """Carrega DiscordSettings a partir de variáveis de ambiente."""
    return DiscordSettings(
        public_key=os.getenv("DISCORD_PUBLIC_KEY", "").strip(),
        bot_token=os.getenv("DISCORD_BOT_TOKEN", ""),
        application_id=os.getenv("DISCORD_APPLICATION_ID", ""),
        deadline_budget_ms=int(
            os.getenv("DISCORD_DEADLINE_BUDGET_MS", str(DEFAULT_DEADLINE_BUDGET_MS))
        ),
        api_version=os.getenv("DISCORD_API_VERSION", DISCORD_API_VERSION),
        api_base_url=os.getenv("DISCORD_API_BASE_URL", DISCORD_API_BASE_URL),
        request_timeout_seconds=float(
            os.getenv("DISCORD_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        max_retries=int(os.getenv("DISCORD_MAX_RETRIES", "3")),
    )


@lru_cache(maxsize=1)
def get_discord_settings() -> DiscordSettings:
    """Retorna instância cacheada de DiscordSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
