"""Instalação do logging estruturado do processo.

Um único handler JSON no logger raiz; `CorrelationIdFilter` acrescenta
correlation_id e service a todo record.

    configure_logging(level="INFO", service_name="pyloto_interactions",
                      correlation_id_getter=get_correlation_id)
    logger = get_logger(__name__)
    logger.info("interaction_acknowledged", extra={"elapsed_ms": 42})

Logs nunca carregam corpo de interação, tokens de entrega ou bot token.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "pyloto_interactions"

# Bibliotecas HTTP logam URLs completas (incluindo tokens de interação)
NOISY_LOGGERS: tuple[str, ...] = ("httpx", "httpcore")


def _normalize_level(level: str) -> str:
    normalized = level.strip().upper()
    if normalized not in VALID_LOG_LEVELS:
        allowed = ", ".join(sorted(VALID_LOG_LEVELS))
        raise ValueError(f"Nível de log inválido: {level}. Válidos: {allowed}")
    return normalized


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Substitui os handlers do logger raiz por um handler JSON.

    Args:
        level: DEBUG, INFO, WARNING, ERROR ou CRITICAL (sem distinção de caixa).
        service_name: Valor do campo `service`.
        correlation_id_getter: Fonte do correlation_id corrente (ContextVar
            de app/observability).

    Raises:
        ValueError: Nível desconhecido.
    """
    normalized = _normalize_level(level)

    json_handler = logging.StreamHandler()
    json_handler.setFormatter(create_json_formatter())
    json_handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    json_handler.setLevel(normalized)

    root_logger = logging.getLogger()
    root_logger.handlers = [json_handler]
    root_logger.setLevel(normalized)

    for noisy in NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
