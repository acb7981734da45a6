"""Erros e helpers de parsing para a API REST do Discord."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# 400, 401, 403, 404 e 405 não mudam com nova tentativa
PERMANENT_STATUS_CODES = frozenset({400, 401, 403, 404, 405})

# Token de interação inválido/expirado (15 min após a interação)
UNKNOWN_INTERACTION_CODE = 10062
UNKNOWN_WEBHOOK_CODE = 10015


@dataclass(frozen=True)
class DiscordApiError:
    """Erro retornado pela API (corpo `{"code": ..., "message": ...}`)."""

    status_code: int
    error_code: int
    error_message: str
    is_permanent: bool


def is_permanent_error(status_code: int, error_code: int) -> bool:
    """Classifica erro como permanente ou transitório.

    Permanentes: 4xx exceto 429; códigos de interação/webhook desconhecidos.
    Transitórios: 429 (rate limit) e 5xx.
    """
    if error_code in (UNKNOWN_INTERACTION_CODE, UNKNOWN_WEBHOOK_CODE):
        return True
    return status_code in PERMANENT_STATUS_CODES


def parse_discord_error(
    response_data: Any,
    status_code: int,
) -> DiscordApiError | None:
    """Extrai erro do response da API.

    Args:
        response_data: JSON do response (qualquer tipo)
        status_code: Status HTTP

    Returns:
        DiscordApiError se status >= 400, None se sucesso
    """
    if status_code < 400:
        return None

    error_code = 0
    error_message = "unknown_error"
    if isinstance(response_data, dict):
        raw_code = response_data.get("code", 0)
        error_code = raw_code if isinstance(raw_code, int) else 0
        error_message = str(response_data.get("message", error_message))

    return DiscordApiError(
        status_code=status_code,
        error_code=error_code,
        error_message=error_message,
        is_permanent=is_permanent_error(status_code, error_code),
    )
