"""Conector Discord - adapter de borda para a API de interações.

Este módulo é o único ponto de IO para o canal Discord.
Responsabilidades:
- Verificação Ed25519 de interações HTTP
- Parse seguro do webhook de interações
- HTTP client para callbacks, follow-ups e registro de comandos
- Erros da API Discord
"""

from .api_errors import DiscordApiError, is_permanent_error, parse_discord_error
from .http_client import DiscordHttpClient, create_discord_http_client
from .signature import (
    InteractionSignatureVerifier,
    InvalidPublicKeyError,
    SignatureResult,
    verify_interaction_signature,
)

__all__ = [
    "DiscordApiError",
    "DiscordHttpClient",
    "InteractionSignatureVerifier",
    "InvalidPublicKeyError",
    "SignatureResult",
    "create_discord_http_client",
    "is_permanent_error",
    "parse_discord_error",
    "verify_interaction_signature",
]
